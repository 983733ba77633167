# tests/test_commands.py - command execution and output tokenizer tests
import asyncio
import logging
import os
import unittest

from replica_agent.errors import ExecutionError
from replica_agent.utils.commands import run_command, split_command
from replica_agent.utils.output import command_lines, command_tokens, output_lines, output_tokens

log = logging.getLogger()


class SplitCommandTests(unittest.TestCase):
    def test_split_command(self):
        self.assertEqual(split_command("  du  -sb /var/lib/mysql "), ("du", ["-sb", "/var/lib/mysql"]))

    def test_split_command_no_args(self):
        self.assertEqual(split_command("hostname"), ("hostname", []))

    def test_split_command_does_not_honour_quotes(self):
        self.assertEqual(split_command('mount "/mnt/my snap"'), ("mount", ['"/mnt/my', 'snap"']))


class RunCommandTests(unittest.IsolatedAsyncioTestCase):
    def setUp(self):
        log.debug("Preparing %s", self._testMethodName)

    async def test_run_command_captures_stdout(self):
        result = await run_command("echo hello   world")
        self.assertTrue(result.ok)
        self.assertEqual(result.returncode, 0)
        self.assertEqual(result.output, b"hello world\n")

    async def test_run_command_does_not_read_server_stdin(self):
        # an open pipe on fd 0 that never reaches EOF
        read_fd, write_fd = os.pipe()
        saved_stdin = os.dup(0)
        os.dup2(read_fd, 0)
        try:
            result = await asyncio.wait_for(run_command("cat"), timeout=5)
        finally:
            os.dup2(saved_stdin, 0)
            for fd in (saved_stdin, read_fd, write_fd):
                os.close(fd)
        self.assertTrue(result.ok)
        self.assertEqual(result.output, b"")

    async def test_run_command_nonzero_exit_raises(self):
        with self.assertRaises(ExecutionError):
            await run_command("false")

    async def test_run_command_nonzero_exit_unchecked(self):
        result = await run_command("false", check=False)
        self.assertFalse(result.ok)
        self.assertEqual(result.returncode, 1)

    async def test_run_command_missing_program_raises(self):
        with self.assertRaises(ExecutionError):
            await run_command("no-such-program-for-replica-agent --help")

    async def test_run_command_missing_program_unchecked_raises(self):
        with self.assertRaises(ExecutionError):
            await run_command("no-such-program-for-replica-agent", check=False)

    async def test_run_command_empty_raises(self):
        with self.assertRaises(ExecutionError):
            await run_command("")
        with self.assertRaises(ExecutionError):
            await run_command("   ")


class OutputTests(unittest.TestCase):
    def test_output_lines(self):
        self.assertEqual(output_lines(b"host1\nhost2\n"), ["host1", "host2"])

    def test_output_lines_empty(self):
        self.assertEqual(output_lines(b""), [""])

    def test_output_lines_trims_surrounding_newlines(self):
        self.assertEqual(output_lines(b"\nhost1\n\n"), ["host1"])

    def test_output_tokens(self):
        self.assertEqual(output_tokens(b"12345\t/some/path\n"), [["12345", "/some/path"]])

    def test_output_tokens_leading_whitespace(self):
        rows = output_tokens(b"  lv1 vg0 /dev/vg0/lv1\n  lv2\tvg0 /dev/vg0/lv2\n")
        self.assertEqual(rows, [
            ["", "lv1", "vg0", "/dev/vg0/lv1"],
            ["", "lv2", "vg0", "/dev/vg0/lv2"],
        ])

    def test_output_tokens_custom_delimiter(self):
        self.assertEqual(output_tokens(b"a:b:c", ":"), [["a", "b", "c"]])


class CommandOutputTests(unittest.IsolatedAsyncioTestCase):
    async def test_command_lines(self):
        self.assertEqual(await command_lines("echo db1"), ["db1"])

    async def test_command_tokens(self):
        self.assertEqual(await command_tokens("echo 4096 /mnt/snap"), [["4096", "/mnt/snap"]])

    async def test_command_tokens_propagates_failure(self):
        with self.assertRaises(ExecutionError):
            await command_tokens("false")
