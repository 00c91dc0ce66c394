# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

from typing import IO

from . import AbstractRunner, DumpRunner, HelpRunner, VersionRunner
from ..arghelp import AppArgumentParser
from ..console import Console
from ..settings import Settings


class RunnerFactory:
    @staticmethod
    def create(settings: Settings, console: Console, parser: AppArgumentParser, stdin: IO[bytes] = None) -> AbstractRunner:
        if settings.version:
            return VersionRunner(settings, console)
        elif settings.infile is None:
            return HelpRunner(settings, console, parser.format_help())
        return DumpRunner(settings, console, stdin)
