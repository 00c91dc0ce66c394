# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from __future__ import annotations

import sys
from typing import IO, List, NoReturn

from .arghelp import AppArgumentParser
from .console import Console
from .runner import RunnerFactory
from .settings import Settings


# noinspection PyMethodMayBeStatic
class App:
    EXIT_OK = 0
    EXIT_ERROR = 1
    EXIT_INTERRUPTED = 130

    def __init__(self, argv: List[str] = None, stdin: IO[bytes] = None, stdout: IO[str] = None, stderr: IO[str] = None):
        self._argv = argv
        self._stdin = stdin
        self._stdout = stdout
        self._stderr = stderr

    def run(self) -> NoReturn:
        self._exit(self.execute())

    def execute(self) -> int:
        parser = AppArgumentParser()
        settings = self._parse_args(parser)  # help processing is handled by argparse
        console = Console(settings.debug, self._stdout, self._stderr)

        try:
            RunnerFactory.create(settings, console, parser, self._stdin).run()
        except KeyboardInterrupt:
            console.flush_buffers()
            return self.EXIT_INTERRUPTED
        except Exception as e:
            console.on_exception(e)
            return self.EXIT_ERROR
        return self.EXIT_OK

    def _parse_args(self, parser: AppArgumentParser) -> Settings:
        settings = Settings()
        parser.parse_args(self._argv, namespace=settings)
        return settings

    def _exit(self, code: int) -> NoReturn:
        sys.exit(code)
