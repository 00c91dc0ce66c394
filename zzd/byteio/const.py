# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from enum import Enum
from typing import Dict

PRINTABLE_CHARCODES = range(0x20, 0x7f)
UNPRINTABLE_DEFAULT_CHAR = '.'
STDIN_FILENAME = '-'
STDOUT_FILENAME = '-'
MAX_BYTES_PER_LINE = 256


class NumericMode(Enum):
    HEXADECIMAL = 'hex'
    HEXADECIMAL_UPPER = 'hex-upper'
    BINARY = 'binary'


# binary cells are 4x wider than hex ones, hence fewer bytes per line
DEFAULT_BYTES_PER_LINE: Dict[NumericMode, int] = {
    NumericMode.HEXADECIMAL: 16,
    NumericMode.HEXADECIMAL_UPPER: 16,
    NumericMode.BINARY: 6,
}
DEFAULT_BYTES_PER_GROUP: Dict[NumericMode, int] = {
    NumericMode.HEXADECIMAL: 2,
    NumericMode.HEXADECIMAL_UPPER: 2,
    NumericMode.BINARY: 1,
}
