# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from . import AbstractNumericFormatter


class BinaryFormatter(AbstractNumericFormatter):
    CELL_WIDTH = 8

    def _format_cell(self, b: int) -> str:
        return f'{b:08b}'
