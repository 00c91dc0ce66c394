# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import IO, List

from .const import STDIN_FILENAME
from ..common import InputError
from ..console import ConsoleDebugBuffer


class Reader:
    """
    Loads the whole input into memory. The reserved filename ``-`` selects
    standard input; at most ``byte_limit`` bytes are read when the limit is set.
    """
    READ_CHUNK_SIZE: int = 64 * 1024

    def __init__(self, filename: str, debug_buffer: ConsoleDebugBuffer = None, stdin: IO[bytes] = None):
        self._filename = filename
        self._debug_buffer = debug_buffer
        self._stdin = stdin
        self._io: IO[bytes]|None = None

    @property
    def reading_stdin(self) -> bool:
        return self._filename == STDIN_FILENAME

    def read(self, byte_limit: int|None = None) -> bytes:
        try:
            self._open()
            return self._read_all(byte_limit)
        except OSError as e:
            raise InputError(self._filename, e) from e
        finally:
            self.close()

    def _open(self):
        if self.reading_stdin:
            self._io = self._stdin or sys.stdin.buffer
            self._debug(1, 'Reading from stdin')
        else:
            self._io = open(self._filename, 'rb')
            self._debug(1, f'Opened file: {self._filename}')

    def _read_all(self, byte_limit: int|None) -> bytes:
        chunks: List[bytes] = []
        total = 0
        while True:
            chunk_size = self.READ_CHUNK_SIZE
            if byte_limit is not None:
                chunk_size = min(chunk_size, byte_limit - total)
                if chunk_size <= 0:
                    self._debug(2, f'Byte limit reached: {byte_limit}')
                    break

            raw_input = self._io.read(chunk_size)
            if not raw_input:
                self._debug(2, 'Encountered EOF')
                break

            self._debug(3, f'Read chunk: len {len(raw_input)}', offset=total)
            chunks.append(raw_input)
            total += len(raw_input)

        self._debug(1, f'Bytes read: {total}')
        return b''.join(chunks)

    def _debug(self, level: int, s: str, offset: int = None):
        if self._debug_buffer:
            self._debug_buffer.write(level, s, offset=offset)

    def close(self):
        # stdin is owned by the process, not by the reader
        if self.reading_stdin:
            return
        if self._io and not self._io.closed:
            self._io.close()
