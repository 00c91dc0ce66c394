# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from .common import ZzdError, ArgumentError, ConfigurationError, InputError, OutputError
from .version import __version__

from .arghelp import AppArgumentParser
from .app import App
