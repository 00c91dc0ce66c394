# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from . import AbstractNumericFormatter


class HexFormatter(AbstractNumericFormatter):
    CELL_WIDTH = 2

    def __init__(self, upper: bool = False):
        self._upper = upper
        super().__init__()

    def _format_cell(self, b: int) -> str:
        if self._upper:
            return f'{b:02X}'
        return f'{b:02x}'
