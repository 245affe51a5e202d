# -----------------------------------------------------------------------------
# Author: Frank Campbell Bogle
# Created: 2026-10-17
# Description: TerminalPrompt.py
# -----------------------------------------------------------------------------
import sys
from typing import Any, Optional, TextIO


class TerminalPrompt:
    """
    Interactive question/answer handle on a pair of text streams.

    Use as a context manager; close() runs on every exit path and the
    handle refuses further use afterwards.
    """

    def __init__(self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None):
        self.stdin = stdin or sys.stdin
        self.stdout = stdout or sys.stdout
        self.closed = False

    def __enter__(self) -> "TerminalPrompt":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def _check_open(self) -> None:
        if self.closed:
            raise ValueError("TerminalPrompt is closed")

    def question(self, prompt: str) -> str:
        """Show `prompt` and return one line of input (without the newline). EOF gives ""."""
        self._check_open()
        self.stdout.write(prompt)
        self.stdout.flush()

        line = self.stdin.readline()
        return line.rstrip("\r\n")

    def write(self, text: str = "") -> None:
        self._check_open()
        self.stdout.write(f"{text}\n")

    def close(self) -> None:
        if self.closed:
            return
        self.closed = True
        self.stdout.flush()
