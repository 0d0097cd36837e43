from __future__ import annotations

import sys
from typing import Optional, TextIO


class ConsoleInput:
    """Byte producer backed by a text stream.

    A whole line is read whenever the buffer runs dry and then handed out one
    byte at a time, newline included. Returns None once the stream is exhausted.
    Text is encoded as Latin-1, so characters above U+00FF arrive as b"?".
    """

    def __init__(self, stream: Optional[TextIO] = None, prompt: Optional[str] = None, prompt_stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdin
        self.prompt = prompt
        self.prompt_stream = prompt_stream if prompt_stream is not None else sys.stderr
        self._buffer = b''
        self._eof = False

    def __call__(self) -> Optional[int]:
        if not self._buffer and not self._eof:
            if self.prompt:
                self.prompt_stream.write(self.prompt)
                self.prompt_stream.flush()
            line = self.stream.readline()
            if not line:
                self._eof = True
            else:
                self._buffer = line.encode('latin-1', errors='replace')
        if not self._buffer:
            return None
        value = self._buffer[0]
        self._buffer = self._buffer[1:]
        return value


class ConsoleOutput:
    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def __call__(self, value: int) -> None:
        self.stream.write(chr(value))
        self.stream.flush()
