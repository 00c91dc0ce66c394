# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import re
from argparse import HelpFormatter, Action, ArgumentParser, SUPPRESS
from typing import Optional, Iterable, List

import pytermor as pt

from .byteio import NumericMode, OptionResolver, STDIN_FILENAME, STDOUT_FILENAME


def _bold(s: str) -> str:
    return pt.render(s, pt.Style(bold=True))


def _underlined(s: str) -> str:
    return pt.render(s, pt.Style(underlined=True))


def _default(s: str) -> str:
    return pt.render(s, pt.Style(fg='yellow'))


class CustomHelpFormatter(HelpFormatter):
    INDENT_INCREMENT = 2
    INDENT = ' ' * INDENT_INCREMENT

    @staticmethod
    def format_header(title: str) -> str:
        return _bold(title.upper())

    def __init__(self, prog):
        super().__init__(prog, max_help_position=30, indent_increment=self.INDENT_INCREMENT)

    def start_section(self, heading: Optional[str]):
        super().start_section(self.format_header(heading))

    def add_usage(self, usage: Optional[str], actions: Iterable[Action], groups: Iterable,
                  prefix: Optional[str] = None):
        super().add_text(self.format_header('usage'))

        usage = usage.replace("\n", f"\n{self.INDENT}")
        super().add_usage(usage, actions, groups, prefix=self.INDENT)

    def add_examples(self, examples: List[str]):
        self.start_section('example' + ('s' if len(examples) > 1 else ''))
        self._add_item(self._format_text, ['\n'.join(examples)])
        self.end_section()

    def _format_action_invocation(self, action):
        # same as in superclass, but without printing argument for short options
        if not action.option_strings:
            default = self._get_default_metavar_for_positional(action)
            metavar, = self._metavar_formatter(action, default)(1)
            return metavar

        parts = []
        if action.nargs == 0:
            parts.extend(action.option_strings)
        else:
            default = self._get_default_metavar_for_optional(action)
            args_string = self._format_args(action, default)
            for option_string in action.option_strings:
                if len(option_string) > 2 or len(action.option_strings) == 1:
                    parts.append(f'{option_string} {args_string}')
                else:
                    parts.append(option_string)

        return ', '.join(parts)

    def _format_text(self, text: str) -> str:
        return super()._format_text(text).rstrip('\n') + '\n'

    def _fill_text(self, text, width, indent):
        return ''.join(indent + line for line in text.splitlines(keepends=True))


class CustomArgumentParser(ArgumentParser):
    def __init__(self, examples: List[str] = None, epilog: List[str] = None, usage: List[str] = None, **kwargs):
        self.examples = examples
        kwargs.update({
            'epilog': '\n'.join(epilog or []),
            'usage': '\n'.join(usage or []) or None,
        })
        super().__init__(**kwargs)

    def format_help(self) -> str:
        formatter = self._get_formatter()
        if self.epilog:
            formatter.add_text(' ')
            formatter.add_text(self.epilog)
        if self.examples and isinstance(formatter, CustomHelpFormatter):
            formatter.add_examples(self.examples)

        ending_formatted = formatter.format_help()
        epilog, self.epilog = self.epilog, None
        try:
            result = super().format_help() + ending_formatted
        finally:
            self.epilog = epilog
        # remove ':' from headers ('<_b>header:<_f>'):
        result = re.sub(r'(\033\[[0-9;]*m)?\s*:\s*(\n|\033|$)', r'\1\2', result)
        return result


class AppArgumentParser(CustomArgumentParser):
    def __init__(self):
        hex_mode, bin_mode = NumericMode.HEXADECIMAL, NumericMode.BINARY
        hex_cols, bin_cols = OptionResolver.default_bytes_per_line(hex_mode), OptionResolver.default_bytes_per_line(bin_mode)
        hex_group, bin_group = OptionResolver.default_bytes_per_group(hex_mode), OptionResolver.default_bytes_per_group(bin_mode)

        super().__init__(
            description='Hexadecimal and binary dump utility',
            usage=[
                '%(prog)s [<options>] <infile> [<outfile>]',
                '%(prog)s --version',
                '%(prog)s --help',
            ],
            epilog=[
                'Numeric arguments are accepted in decimal, hexadecimal (0x), octal (0o) and binary (0b) notation.'
                ' A value that cannot be parsed as a non-negative integer is replaced with the default for the'
                ' current mode.',
                '',
                f'Binary mode ({_bold("--bits")}) takes precedence over {_bold("--upper")}.',
                '',
                '(c) 2022 A. Shavykin <0.delameter@gmail.com>',
            ],
            examples=[
                'Dump a file with 8 bytes per line, grouped by 4',
                ''.ljust(4) + f"{_underlined('%(prog)s')} -c{_underlined('8')} -g{_underlined('4')} file.bin",
                '',
                'Dump first 64 bytes of stdin as binary digits',
                ''.ljust(4) + f"{_underlined('%(prog)s')} --bits -l{_underlined('64')} -",
                '\n'
            ],
            add_help=False,
            formatter_class=lambda prog: CustomHelpFormatter(prog),
            prog='zzd'
        )

        self.add_argument('infile', metavar='<infile>', nargs='?', help=f'file to read from; "{STDIN_FILENAME}" reads stdin')
        self.add_argument('outfile', metavar='<outfile>', nargs='?', help=f'file to write to; "{STDOUT_FILENAME}" writes to stdout '+_default('[default: stdout]'))

        modes_group = self.add_argument_group('operating mode')
        modes_group.add_argument('-b', '--bits', dest='binary', action='store_true', default=False, help='binary digit dump '+_default('[default: hexadecimal]'))
        modes_group.add_argument('-u', '--upper', action='store_true', default=False, help='use upper-case hex letters')
        modes_group.add_argument('-v', '--version', action='store_true', default=False, help='show app version and exit')
        modes_group.add_argument('-h', '--help', action='help', default=SUPPRESS, help='show this help message and exit')

        layout_group = self.add_argument_group('layout options')
        layout_group.add_argument('-c', '--cols', metavar='<bytes>', nargs='?', default=None, help='format <bytes> per line '+_default(f'[default: {hex_cols}, binary: {bin_cols}]'))
        layout_group.add_argument('-g', '--groupsize', metavar='<bytes>', nargs='?', default=None, help='number of bytes per group '+_default(f'[default: {hex_group}, binary: {bin_group}]'))
        layout_group.add_argument('-l', '--len', dest='max_len', metavar='<len>', nargs='?', default=None, help='stop after <len> bytes '+_default('[default: no limit]'))

        generic_group = self.add_argument_group('generic options')
        generic_group.add_argument('-d', '--debug', action='count', default=0, help='print diagnostics to stderr; can be used from 1 to 3 times, each level increases verbosity (-d|dd|ddd)')
