# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from ._abstract import AbstractNumericFormatter

from .binary import BinaryFormatter
from .hex import HexFormatter

from .factory import FormatterFactory
