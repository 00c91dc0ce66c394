# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from ._abstract import AbstractRunner

from .dump import DumpRunner
from .help import HelpRunner
from .version import VersionRunner

from .factory import RunnerFactory
