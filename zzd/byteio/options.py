# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import Any, Sequence

from .const import NumericMode, DEFAULT_BYTES_PER_LINE, DEFAULT_BYTES_PER_GROUP, UNPRINTABLE_DEFAULT_CHAR, \
    MAX_BYTES_PER_LINE
from ..common import ConfigurationError


def parse_unsigned(value: str|None) -> int|None:
    """
    Parse a user-supplied non-negative integer. Decimal, ``0x``/``0o``/``0b``
    prefixed literals and ``_`` digit separators are accepted. Anything else,
    including signed values, yields None instead of raising.
    """
    if value is None:
        return None
    if isinstance(value, int):
        return value if value >= 0 else None

    for base in (0, 10):  # base 0 rejects leading zeros, e.g. '010'
        try:
            result = int(value, base)
        except ValueError:
            continue
        if result < 0 or value.lstrip().startswith('+'):
            return None
        return result
    return None


class DumpOptions:
    """
    Read-only set of formatting options consumed by the renderer. Invalid
    widths are rejected on construction, so an instance is always safe to
    render with.
    """
    __slots__ = ('_bytes_per_line', '_bytes_per_group', '_unprintable_char', '_mode', '_byte_limit')

    def __init__(self,
                 bytes_per_line: int = DEFAULT_BYTES_PER_LINE[NumericMode.HEXADECIMAL],
                 bytes_per_group: int = DEFAULT_BYTES_PER_GROUP[NumericMode.HEXADECIMAL],
                 unprintable_char: str = UNPRINTABLE_DEFAULT_CHAR,
                 mode: NumericMode = NumericMode.HEXADECIMAL,
                 byte_limit: int|None = None):
        if not isinstance(mode, NumericMode):
            raise ConfigurationError(f'Invalid numeric mode: {mode!r}')
        if not isinstance(bytes_per_line, int) or bytes_per_line <= 0:
            raise ConfigurationError(f'Bytes per line should be a positive integer, got: {bytes_per_line!r}')
        if bytes_per_line > MAX_BYTES_PER_LINE:
            raise ConfigurationError(f'Bytes per line should not exceed {MAX_BYTES_PER_LINE}, got: {bytes_per_line!r}')
        if not isinstance(bytes_per_group, int) or bytes_per_group <= 0:
            raise ConfigurationError(f'Bytes per group should be a positive integer, got: {bytes_per_group!r}')
        if not isinstance(unprintable_char, str) or len(unprintable_char) != 1:
            raise ConfigurationError(f'Unprintable char should be a single character, got: {unprintable_char!r}')
        if byte_limit is not None and (not isinstance(byte_limit, int) or byte_limit < 0):
            raise ConfigurationError(f'Byte limit should be a non-negative integer, got: {byte_limit!r}')

        self._bytes_per_line = bytes_per_line
        self._bytes_per_group = bytes_per_group
        self._unprintable_char = unprintable_char
        self._mode = mode
        self._byte_limit = byte_limit

    @property
    def bytes_per_line(self) -> int: return self._bytes_per_line
    @property
    def bytes_per_group(self) -> int: return self._bytes_per_group
    @property
    def unprintable_char(self) -> str: return self._unprintable_char
    @property
    def mode(self) -> NumericMode: return self._mode
    @property
    def byte_limit(self) -> int|None: return self._byte_limit

    def apply_limit(self, data: Sequence[int]) -> Sequence[int]:
        if self._byte_limit is None or len(data) <= self._byte_limit:
            return data
        return data[:self._byte_limit]

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DumpOptions):
            return NotImplemented
        return self._as_tuple() == other._as_tuple()

    def __hash__(self) -> int:
        return hash(self._as_tuple())

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}(bytes_per_line={self._bytes_per_line}, ' \
               f'bytes_per_group={self._bytes_per_group}, unprintable_char={self._unprintable_char!r}, ' \
               f'mode={self._mode.name}, byte_limit={self._byte_limit})'

    def _as_tuple(self) -> tuple:
        return self._bytes_per_line, self._bytes_per_group, self._unprintable_char, self._mode, self._byte_limit


class OptionResolver:
    """Fills the widths the caller left unset with the defaults of the chosen mode."""

    @staticmethod
    def default_bytes_per_line(mode: NumericMode) -> int:
        return DEFAULT_BYTES_PER_LINE[mode]

    @staticmethod
    def default_bytes_per_group(mode: NumericMode) -> int:
        return DEFAULT_BYTES_PER_GROUP[mode]

    def resolve(self,
                mode: NumericMode = NumericMode.HEXADECIMAL,
                bytes_per_line: int|None = None,
                bytes_per_group: int|None = None,
                byte_limit: int|None = None,
                unprintable_char: str = UNPRINTABLE_DEFAULT_CHAR) -> DumpOptions:
        if bytes_per_line is None:
            bytes_per_line = self.default_bytes_per_line(mode)
        if bytes_per_group is None:
            bytes_per_group = self.default_bytes_per_group(mode)

        return DumpOptions(bytes_per_line, bytes_per_group, unprintable_char, mode, byte_limit)
