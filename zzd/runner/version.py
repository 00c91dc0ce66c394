# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import pytermor

from . import AbstractRunner
from ..version import __version__


class VersionRunner(AbstractRunner):
    def run(self):
        self._console.info("es7s/zzd".ljust(16) + __version__)
        self._console.info("pytermor".ljust(16) + pytermor.__version__)
