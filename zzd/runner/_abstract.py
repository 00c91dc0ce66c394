# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
from abc import ABCMeta, abstractmethod

from ..console import Console
from ..settings import Settings


class AbstractRunner(metaclass=ABCMeta):
    def __init__(self, settings: Settings, console: Console):
        self._settings = settings
        self._console = console

    @abstractmethod
    def run(self):
        pass
