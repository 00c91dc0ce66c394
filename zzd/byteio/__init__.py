# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .const import NumericMode, PRINTABLE_CHARCODES, UNPRINTABLE_DEFAULT_CHAR, STDIN_FILENAME, STDOUT_FILENAME, MAX_BYTES_PER_LINE, \
    DEFAULT_BYTES_PER_LINE, DEFAULT_BYTES_PER_GROUP
from .options import DumpOptions, OptionResolver, parse_unsigned

from .reader import Reader
from .renderer import DumpRenderer
