"""Split command output into lines and whitespace-delimited fields."""

import re

from .commands import run_command

FIELD_DELIMITER = r"[ \t]+"


def output_lines(output: bytes) -> list[str]:
    """Decode output and split it into lines.

    Surrounding newlines are trimmed first, so empty output is a single
    empty line.
    """
    text = output.decode("utf-8", errors="replace").strip("\n")
    return text.split("\n")


def output_tokens(output: bytes, delimiter: str = FIELD_DELIMITER) -> list[list[str]]:
    pattern = re.compile(delimiter)
    return [pattern.split(line) for line in output_lines(output)]


async def command_lines(command_line: str) -> list[str]:
    result = await run_command(command_line)
    return output_lines(result.output)


async def command_tokens(command_line: str, delimiter: str = FIELD_DELIMITER) -> list[list[str]]:
    result = await run_command(command_line)
    return output_tokens(result.output, delimiter)
