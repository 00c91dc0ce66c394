# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from contextlib import contextmanager
from typing import IO, Iterator

from . import AbstractRunner
from ..byteio import DumpOptions, DumpRenderer, OptionResolver, Reader
from ..common import OutputError
from ..console import Console, ConsoleDebugBuffer, ConsoleOutputBuffer
from ..settings import Settings


class DumpRunner(AbstractRunner):
    def __init__(self, settings: Settings, console: Console, stdin: IO[bytes] = None):
        super().__init__(settings, console)
        self._stdin = stdin
        self._debug_buffer = ConsoleDebugBuffer(console, 'options')

    def run(self):
        options = self._resolve_options()

        data = Reader(self._settings.infile, ConsoleDebugBuffer(self._console, 'reader'), self._stdin) \
            .read(options.byte_limit)
        self._debug_buffer.write(2, f'Input: {self._console.printd(data)}')

        renderer = DumpRenderer(options, ConsoleDebugBuffer(self._console, 'render'))
        with self._open_output() as io:
            renderer.dump(data, ConsoleOutputBuffer(self._console, io))

    def _resolve_options(self) -> DumpOptions:
        settings = self._settings
        if settings.debug_settings:
            for attr in sorted(vars(settings)):
                self._debug_buffer.write(2, f'{attr}={getattr(settings, attr)!r}')

        self._debug_fallback('cols', settings.cols, settings.bytes_per_line)
        self._debug_fallback('groupsize', settings.groupsize, settings.bytes_per_group)
        self._debug_fallback('len', settings.max_len, settings.byte_limit)

        options = OptionResolver().resolve(
            mode=settings.numeric_mode,
            bytes_per_line=settings.bytes_per_line,
            bytes_per_group=settings.bytes_per_group,
            byte_limit=settings.byte_limit,
        )
        self._debug_buffer.write(1, f'Resolved: {options!r}')
        return options

    def _debug_fallback(self, name: str, raw_value: str|None, parsed_value: int|None):
        # unparsable values silently fall back to the mode default
        if raw_value is not None and parsed_value is None:
            self._debug_buffer.write(1, f'Cannot parse {name}={raw_value!r}, using the default')

    @contextmanager
    def _open_output(self) -> Iterator[IO[str]]:
        if self._settings.writing_stdout:
            yield self._console.stdout
            return

        filename = self._settings.outfile
        try:
            io = open(filename, 'wt', encoding='utf-8', newline='\n')
        except OSError as e:
            raise OutputError(filename, e) from e
        self._debug_buffer.write(1, f'Writing to file: {filename}')
        with io:
            yield io
