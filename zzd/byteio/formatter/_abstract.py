# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import abc
from typing import List


class AbstractNumericFormatter(metaclass=abc.ABCMeta):
    CELL_WIDTH: int

    def __init__(self):
        self._cells: List[str] = [self._format_cell(b) for b in range(0x100)]

    @property
    def cell_width(self) -> int:
        return self.CELL_WIDTH

    def format(self, b: int) -> str:
        return self._cells[b]

    @abc.abstractmethod
    def _format_cell(self, b: int) -> str: raise NotImplementedError
