# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from . import AbstractRunner
from ..console import Console
from ..settings import Settings


class HelpRunner(AbstractRunner):
    def __init__(self, settings: Settings, console: Console, help_text: str):
        super().__init__(settings, console)
        self._help_text = help_text

    def run(self):
        self._console.info(self._help_text, end='')
