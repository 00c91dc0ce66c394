# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from . import AbstractNumericFormatter, BinaryFormatter, HexFormatter
from ..const import NumericMode


class FormatterFactory:
    @staticmethod
    def create(mode: NumericMode) -> AbstractNumericFormatter:
        if mode is NumericMode.HEXADECIMAL:
            return HexFormatter(upper=False)
        elif mode is NumericMode.HEXADECIMAL_UPPER:
            return HexFormatter(upper=True)
        elif mode is NumericMode.BINARY:
            return BinaryFormatter()

        raise RuntimeError(f'Invalid numeric mode {mode}')
