"""Run external commands and capture their output."""

import asyncio
import logging
import re
from dataclasses import dataclass

from ..errors import ExecutionError

logger = logging.getLogger(__name__)

_ARG_SEPARATOR = re.compile(r"[ ]+")


@dataclass
class CommandResult:
    returncode: int
    output: bytes

    @property
    def ok(self) -> bool:
        return self.returncode == 0


def split_command(command_line: str) -> tuple[str, list[str]]:
    """Split a command line into program and arguments.

    Arguments are separated by runs of spaces. There is no quoting, so an
    argument that itself contains a space cannot be expressed.
    """
    tokens = _ARG_SEPARATOR.split(command_line.strip())
    return tokens[0], tokens[1:]


async def run_command(command_line: str, check: bool = True) -> CommandResult:
    """Run a command line and return its exit status and stdout bytes.

    Raises ExecutionError when the program cannot be started, or when
    ``check`` is set and it exits non-zero. With ``check=False`` a non-zero
    exit is returned to the caller as an ordinary result.
    """
    program, args = split_command(command_line)
    if not program:
        raise ExecutionError("empty command")

    logger.debug(f"run_command: {command_line}")
    try:
        proc = await asyncio.create_subprocess_exec(
            program,
            *args,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except OSError as e:
        logger.error(f"Could not start {program}: {e}")
        raise ExecutionError(f"{program}: {e.strerror or e}") from e

    stdout, stderr = await proc.communicate()
    result = CommandResult(returncode=proc.returncode or 0, output=stdout)

    if check and not result.ok:
        err = stderr.decode("utf-8", errors="replace").strip()
        message = f"{command_line}: exit status {proc.returncode}"
        if err:
            message = f"{message}: {err}"
        logger.warning(message)
        raise ExecutionError(message)

    return result
