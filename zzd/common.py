# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------

class ZzdError(Exception):
    pass


class ArgumentError(ZzdError):
    USAGE_MSG = "Run the app with '--help' argument to see the usage"


class ConfigurationError(ArgumentError):
    pass


class InputError(ZzdError):
    def __init__(self, filename: str, cause: Exception):
        self.filename = filename
        self.cause = cause
        super().__init__(f'Cannot read {filename!r}: {getattr(cause, "strerror", None) or cause}')


class OutputError(ZzdError):
    def __init__(self, filename: str, cause: Exception):
        self.filename = filename
        self.cause = cause
        super().__init__(f'Cannot write {filename!r}: {getattr(cause, "strerror", None) or cause}')
