# -----------------------------------------------------------------------------
# es7s/zzd [Hexadecimal and binary dump utility]
# (C) 2022 A. Shavykin <0.delameter@gmail.com>
# -----------------------------------------------------------------------------
import io
import os
import tempfile
import unittest
from contextlib import redirect_stdout

from zzd import App
from zzd.settings import Settings
from zzd.byteio import NumericMode

SCENARIO_ABC = '00000000: 4142 43' + ' ' * 34 + 'ABC\n'


class InterruptedStream(io.BytesIO):
    def read(self, size=-1):
        raise KeyboardInterrupt


class AppTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp_dir = tempfile.TemporaryDirectory()
        self.tmp_path = self._tmp_dir.name
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()

    def tearDown(self) -> None:
        self._tmp_dir.cleanup()

    def _write_file(self, data: bytes, name: str = 'input.bin') -> str:
        path = os.path.join(self.tmp_path, name)
        with open(path, 'wb') as f:
            f.write(data)
        return path

    def _execute(self, *argv: str, stdin: bytes = b'') -> int:
        return App(list(argv), io.BytesIO(stdin), self.stdout, self.stderr).execute()

    def test_dump_file(self):
        path = self._write_file(b'ABC')

        self.assertEqual(self._execute(path), 0)
        self.assertEqual(self.stdout.getvalue(), SCENARIO_ABC)
        self.assertEqual(self.stderr.getvalue(), '')

    def test_dump_stdin(self):
        self.assertEqual(self._execute('-', stdin=b'ABC'), 0)
        self.assertEqual(self.stdout.getvalue(), SCENARIO_ABC)

    def test_dump_empty_stdin(self):
        self.assertEqual(self._execute('-'), 0)
        self.assertEqual(self.stdout.getvalue(), '')

    def test_upper_case(self):
        self._execute('-u', '-', stdin=b'\xab')

        self.assertTrue(self.stdout.getvalue().startswith('00000000: AB '))

    def test_binary_overrides_upper_case(self):
        self._execute('-u', '-b', '-', stdin=bytes(range(6)))

        self.assertEqual(
            self.stdout.getvalue(),
            '00000000: 00000000 00000001 00000010 00000011 00000100 00000101  ......\n',
        )

    def test_columns_and_group_size(self):
        self._execute('-c', '0x4', '-g', '4', '-', stdin=b'abcdef')

        self.assertEqual(self.stdout.getvalue(), '00000000: 61626364  abcd\n00000004: 6566      ef\n')

    def test_unparsable_columns_fall_back_to_default(self):
        self._execute('-c', 'abc', '-', stdin=b'ABC')

        self.assertEqual(self.stdout.getvalue(), SCENARIO_ABC)

    def test_unparsable_columns_in_binary_mode_fall_back_to_binary_default(self):
        self._execute('-b', '-c', 'abc', '-', stdin=bytes(7))

        self.assertEqual(len(self.stdout.getvalue().splitlines()), 2)

    def test_missing_value_falls_back_to_default(self):
        self._execute('-', '-c', stdin=b'ABC')

        self.assertEqual(self.stdout.getvalue(), SCENARIO_ABC)

    def test_length_limit(self):
        self._execute('-l', '2', '-', stdin=bytes(range(10)))

        self.assertEqual(self.stdout.getvalue(), '00000000: 0001' + ' ' * 37 + '..\n')

    def test_unparsable_length_means_no_limit(self):
        self._execute('-l', 'x', '-', stdin=b'ABC')

        self.assertEqual(self.stdout.getvalue(), SCENARIO_ABC)

    def test_zero_columns_is_an_error(self):
        self.assertEqual(self._execute('-c', '0', '-', stdin=b'ABC'), 1)
        self.assertEqual(self.stdout.getvalue(), '')
        self.assertIn('ConfigurationError', self.stderr.getvalue())

    def test_zero_group_size_is_an_error(self):
        self.assertEqual(self._execute('-g', '0', '-', stdin=b'ABC'), 1)
        self.assertEqual(self.stdout.getvalue(), '')

    def test_oversized_columns_is_an_error(self):
        self.assertEqual(self._execute('-c', '99999999999', '-', stdin=b'ABC'), 1)
        self.assertEqual(self.stdout.getvalue(), '')
        self.assertIn('ConfigurationError', self.stderr.getvalue())

    def test_interrupt_exits_without_traceback(self):
        app = App(['-'], InterruptedStream(), self.stdout, self.stderr)

        self.assertEqual(app.execute(), 130)
        self.assertEqual(self.stdout.getvalue(), '')
        self.assertNotIn('Traceback', self.stderr.getvalue())

    def test_missing_file_is_an_error(self):
        path = os.path.join(self.tmp_path, 'missing.bin')

        self.assertEqual(self._execute(path), 1)
        self.assertEqual(self.stdout.getvalue(), '')
        self.assertIn('InputError', self.stderr.getvalue())

    def test_output_file(self):
        infile = self._write_file(b'ABC')
        outfile = os.path.join(self.tmp_path, 'output.txt')

        self.assertEqual(self._execute(infile, outfile), 0)
        self.assertEqual(self.stdout.getvalue(), '')
        with open(outfile, 'rt', encoding='utf-8') as f:
            self.assertEqual(f.read(), SCENARIO_ABC)

    def test_output_file_cannot_be_opened(self):
        infile = self._write_file(b'ABC')

        self.assertEqual(self._execute(infile, self.tmp_path), 1)
        self.assertIn('OutputError', self.stderr.getvalue())

    def test_no_infile_prints_help(self):
        self.assertEqual(self._execute(), 0)
        self.assertIn('USAGE', self.stdout.getvalue())
        self.assertIn('--cols', self.stdout.getvalue())

    def test_help_option(self):
        stdout = io.StringIO()
        with redirect_stdout(stdout), self.assertRaises(SystemExit) as cm:
            self._execute('--help')

        self.assertEqual(cm.exception.code, 0)
        self.assertIn('--groupsize', stdout.getvalue())

    def test_version(self):
        self.assertEqual(self._execute('--version'), 0)
        self.assertIn('1.0.0', self.stdout.getvalue())

    def test_debug_goes_to_stderr(self):
        self._execute('-d', '-', stdin=b'ABC')

        self.assertEqual(self.stdout.getvalue(), SCENARIO_ABC)
        self.assertIn('Resolved', self.stderr.getvalue())


class SettingsTestCase(unittest.TestCase):
    def test_defaults(self):
        settings = Settings()

        self.assertEqual(settings.numeric_mode, NumericMode.HEXADECIMAL)
        self.assertIsNone(settings.bytes_per_line)
        self.assertIsNone(settings.bytes_per_group)
        self.assertIsNone(settings.byte_limit)
        self.assertTrue(settings.writing_stdout)

    def test_numeric_mode_precedence(self):
        self.assertEqual(Settings(upper=True).numeric_mode, NumericMode.HEXADECIMAL_UPPER)
        self.assertEqual(Settings(binary=True).numeric_mode, NumericMode.BINARY)
        self.assertEqual(Settings(binary=True, upper=True).numeric_mode, NumericMode.BINARY)

    def test_numeric_values_are_parsed_leniently(self):
        settings = Settings(cols='0x10', groupsize='four', max_len='0b11')

        self.assertEqual(settings.bytes_per_line, 16)
        self.assertIsNone(settings.bytes_per_group)
        self.assertEqual(settings.byte_limit, 3)


if __name__ == '__main__':
    unittest.main()
