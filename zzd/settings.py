# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from argparse import Namespace
from typing import Any

from .byteio import NumericMode, STDOUT_FILENAME, parse_unsigned


class Settings(Namespace):
    def __init__(self, **kwargs: Any):
        self.binary: bool = False
        self.upper: bool = False
        self.cols: str|None = None  # mode default
        self.groupsize: str|None = None  # mode default
        self.max_len: str|None = None  # no limit
        self.debug: int = 0
        self.infile: str|None = None
        self.outfile: str|None = None
        self.version: bool = False

        super().__init__(**kwargs)

    @property
    def numeric_mode(self) -> NumericMode:
        if self.binary:
            return NumericMode.BINARY
        if self.upper:
            return NumericMode.HEXADECIMAL_UPPER
        return NumericMode.HEXADECIMAL

    @property
    def bytes_per_line(self) -> int|None:
        return parse_unsigned(self.cols)

    @property
    def bytes_per_group(self) -> int|None:
        return parse_unsigned(self.groupsize)

    @property
    def byte_limit(self) -> int|None:
        return parse_unsigned(self.max_len)

    @property
    def writing_stdout(self) -> bool:
        return self.outfile is None or self.outfile == STDOUT_FILENAME

    @property
    def debug_settings(self) -> bool:
        return self.debug >= 2
