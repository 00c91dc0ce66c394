# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Iterator, List, Sequence

from .const import PRINTABLE_CHARCODES
from .formatter import FormatterFactory
from .options import DumpOptions
from ..common import ConfigurationError
from ..console import ConsoleDebugBuffer, ConsoleOutputBuffer


class DumpRenderer:
    """
    Maps a byte sequence to hexdump lines::

        00000000: 4865 6c6c 6f2c 2077 6f72 6c64 210a       Hello, world!.

    Each line consists of the offset of its first byte, the numeric field
    split into groups, and the graphical field. A short last line is padded
    so that its graphical field stays aligned with the lines above.
    """
    OFFSET_SEPARATOR = ': '
    GROUP_SEPARATOR = ' '
    PADDING_SECTION = 2 * ' '

    def __init__(self, options: DumpOptions, debug_buffer: ConsoleDebugBuffer = None):
        if not isinstance(options, DumpOptions):
            raise ConfigurationError(f'Resolved options expected, got: {options!r}')

        self._options = options
        self._formatter = FormatterFactory.create(options.mode)
        self._debug_buffer = debug_buffer
        self._graphical: List[str] = [chr(b) if b in PRINTABLE_CHARCODES else options.unprintable_char
                                      for b in range(0x100)]

    def render(self, data: Sequence[int]) -> Iterator[str]:
        data = self._options.apply_limit(data)
        bytes_per_line = self._options.bytes_per_line

        for offset in range(0, len(data), bytes_per_line):
            yield self.render_line(data[offset:offset + bytes_per_line], offset)

    def render_line(self, line: Sequence[int], offset: int) -> str:
        return ''.join([
            f'{offset:08x}',
            self.OFFSET_SEPARATOR,
            self._format_numeric(line),
            self._justify_numeric(self._options.bytes_per_line - len(line)),
            self.PADDING_SECTION,
            ''.join([self._graphical[b] for b in line]),
            '\n',
        ])

    def dump(self, data: Sequence[int], output_buffer: ConsoleOutputBuffer) -> int:
        self._debug(1, f'Rendering with {self._options!r}')

        lines = 0
        for line in self.render(data):
            output_buffer.write(line, end='', flush=False)
            lines += 1
        output_buffer.flush()

        self._debug(1, f'Lines rendered: {lines}')
        return lines

    def _format_numeric(self, line: Sequence[int]) -> str:
        cells = [self._formatter.format(b) for b in line]
        group = self._options.bytes_per_group
        return self.GROUP_SEPARATOR.join([''.join(cells[i:i + group]) for i in range(0, len(cells), group)])

    def _justify_numeric(self, num_bytes: int) -> str:
        if num_bytes <= 0:
            return ''
        # width of the absent cells plus the group separators among them
        return ' ' * (self._formatter.cell_width * num_bytes + num_bytes // self._options.bytes_per_group)

    def _debug(self, level: int, s: str):
        if self._debug_buffer:
            self._debug_buffer.write(level, s)
