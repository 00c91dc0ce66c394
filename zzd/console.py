# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
import traceback
from abc import ABCMeta, abstractmethod
from typing import IO, List, Any

import pytermor as pt

from .common import ArgumentError


# noinspection PyMethodMayBeStatic
class AbstractConsoleBuffer(metaclass=ABCMeta):
    @abstractmethod
    def flush(self): raise NotImplementedError


class ConsoleOutputBuffer(AbstractConsoleBuffer):
    """
    Accumulates output and hands it over to the underlying stream in batches.
    Nothing is written until the buffer grows past ``threshold`` characters
    or is flushed explicitly.
    """
    FLUSH_THRESHOLD = 64 * 1024

    def __init__(self, console: Console, io: IO = None, threshold: int = FLUSH_THRESHOLD):
        self._console = console
        self._io = io
        self._threshold = threshold
        self._buf: List[str] = []
        self._buf_len = 0
        console.register_buffer(self)

    def write(self, s: str, end='\n', flush=True):
        chunk = f'{s}{end}'
        self._buf.append(chunk)
        self._buf_len += len(chunk)
        if flush or self._buf_len >= self._threshold:
            self.flush()

    def flush(self):
        if not self._buf:
            return

        self._console.print(''.join(self._buf), end='', file=self._io, flush=True)
        self._buf.clear()
        self._buf_len = 0


class ConsoleDebugBuffer(AbstractConsoleBuffer):
    def __init__(self, console: Console, key_prefix: str = None):
        self._console = console
        self._buf = ''
        self._default_prefix = console.format_prefix(key_prefix, Console.FMT_DEBUG_PREFIX) if key_prefix else ''
        console.register_buffer(self)

    def write(self, level: int, s: str, offset: int = None, end='\n', flush=True):
        if self._console.debug_level < level:
            return

        prefix = self._default_prefix
        if isinstance(offset, int):
            prefix = self._console.format_prefix_with_offset(offset)

        self._buf += f'{prefix}{s}{end}'
        if flush:
            self.flush()

    def flush(self):
        if not self._buf:
            return

        self._console.debug(self._buf, end='')
        self._buf = ''


class Console:
    FMT_ERROR_TRACE = pt.Style(fg='red')
    FMT_ERROR = pt.Style(fg='red', bold=True)
    FMT_DEBUG_PREFIX = pt.Style(dim=True)
    FMT_OFFSET = pt.Style(fg='green')
    FMT_SEPARATOR = pt.Style(fg='cyan')
    MAIN_PREFIX_LEN = 8

    def __init__(self, debug_level: int = 0, stdout: IO = None, stderr: IO = None):
        self._debug_level = debug_level
        self._stdout = stdout
        self._stderr = stderr
        self._buffers: List[AbstractConsoleBuffer] = []

    @property
    def debug_level(self) -> int:
        return self._debug_level

    @property
    def stdout(self) -> IO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> IO:
        return self._stderr or sys.stderr

    def register_buffer(self, buffer: AbstractConsoleBuffer):
        self._buffers.append(buffer)

    def flush_buffers(self):
        for buffer in self._buffers:
            buffer.flush()

    def on_exception(self, e: Exception):
        self.flush_buffers()

        if isinstance(e, ArgumentError):
            self.error(f'{e.__class__.__name__}: {e!s}')
            self.hint(e.USAGE_MSG)

        elif self._debug_level > 0:
            tb_lines = [line.rstrip('\n')
                        for line
                        in traceback.format_exception(e.__class__, e, e.__traceback__)]
            error = tb_lines.pop(-1)
            self.print(self.render('\n'.join(tb_lines), self.FMT_ERROR_TRACE), file=self.stderr)
            self.error(error)

        else:
            self.error(f'{e.__class__.__name__}: {e!s}')
            self.hint("Run the app with '" + self.render('--debug', pt.Style(bold=True)) + "' argument to see the details")

    def debug(self, s: str = '', end='\n'):
        self.print(s, end=end, file=self.stderr)

    def info(self, s: str = '', end='\n'):
        self.print(s, end=end)

    def hint(self, s: str = '', end='\n'):
        self.print(s, end=end, file=self.stderr)

    def error(self, s: str = '', end='\n'):
        self.print(self.render('ERROR: ', self.FMT_ERROR) + self.render(s, self.FMT_ERROR), end=end, file=self.stderr)

    def get_separator(self) -> str:
        return self.render('│', self.FMT_SEPARATOR)

    def format_prefix(self, label: str, style: pt.Style) -> str:
        return self.render(f'{label!s:>{self.MAIN_PREFIX_LEN}.{self.MAIN_PREFIX_LEN}s}', style) + self.get_separator()

    def format_prefix_with_offset(self, offset: int) -> str:
        return self.format_prefix(f'{offset:08x}', self.FMT_OFFSET)

    def printd(self, v: Any, max_input_len: int = 5) -> str:
        if isinstance(v, (bytes, bytearray)):
            result = f'len {len(v)}'
            if self._debug_level < 3:
                return result
            preview = ' '.join([f'{b:02x}' for b in v[:max_input_len]])
            if len(v) > max_input_len:
                preview += ' ..'
            return f'{result} [{preview}]'
        return f'{v!s}'

    def render(self, s: str, style: pt.Style) -> str:
        return pt.render(s, style)

    def print(self, s: str, end='\n', file: IO = None, flush: bool = False):
        print(s, end=end, file=file or self.stdout, flush=flush)
