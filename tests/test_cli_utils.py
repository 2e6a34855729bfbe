# tests/test_cli_utils.py

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import io
import unittest
from contextlib import redirect_stdout, redirect_stderr
from unittest import mock

import cli
import main
from utils import *

# ======================================================================
#                        UNIT TESTS FOR UTILS
# ======================================================================

class TestUtils(unittest.TestCase):

    def test_str_to_bits(self):
        self.assertEqual(str_to_bits("01_10 1"), [0, 1, 1, 0, 1])
        self.assertEqual(str_to_bits(""), [])
        self.assertEqual(str_to_bits("1\t0"), [1, 0])

    def test_str_to_bits_invalid(self):
        with self.assertRaises(ValueError):
            str_to_bits("0102")

    def test_bits_to_str(self):
        self.assertEqual(bits_to_str([1, 0, 1, 1]), "1011")

    def test_bits_to_bytes(self):
        out, padding = bits_to_bytes([1, 0, 1, 0, 1, 1, 0, 0])
        self.assertEqual(out, b'\xac')
        self.assertEqual(padding, 0)

        out, padding = bits_to_bytes([1, 1, 1])
        self.assertEqual(out, b'\xe0')
        self.assertEqual(padding, 5)

        self.assertEqual(bits_to_bytes([]), (b'', 0))

    def test_format_table(self):
        lines = format_table({'a': [0], 'b': []})
        self.assertEqual(len(lines), 2)
        self.assertTrue(lines[0].endswith(": 0"))
        self.assertTrue(lines[1].endswith("<empty>"))


# ======================================================================
#                        CLI
# ======================================================================

def _run(argv):
    out, err = io.StringIO(), io.StringIO()
    with mock.patch.object(sys, "argv", ["main.py"] + argv), redirect_stdout(out), redirect_stderr(err):
        code = main.main()
    return code, out.getvalue(), err.getvalue()


class TestCli(unittest.TestCase):

    def test_parser(self):
        args = cli.init().parse_args(["encode", "-t", "abc", "--stats"])
        self.assertEqual(args.cmd, "encode")
        self.assertEqual(args.text, "abc")
        self.assertTrue(args.stats)
        self.assertFalse(args.table)
        self.assertIs(args.func, cli.encode_mode)

    def test_secret(self):
        code, out, _ = _run(["secret"])
        self.assertEqual(code, 0)
        self.assertIn("Decoded: huffmanestcool", out)
        self.assertIn("Round-trip ok: True", out)

    def test_encode(self):
        code, out, _ = _run(["encode", "-t", "abracadabra", "--table", "--stats"])
        self.assertEqual(code, 0)
        self.assertEqual(out.splitlines()[0], "01111001100011010111100")
        self.assertIn("=== Code table ===", out)
        self.assertIn("23 bits -> 3 bytes", out)

    def test_decode(self):
        code, out, _ = _run(["decode", "-t", "abracadabra", "-b", "0111"])
        self.assertEqual(code, 0)
        self.assertEqual(out.strip(), "ab")

    def test_decode_malformed(self):
        code, _, err = _run(["decode", "-t", "abracadabra", "-b", "011"])
        self.assertEqual(code, 1)
        self.assertIn("[ERROR]", err)

    def test_table_default(self):
        code, out, _ = _run(["table"])
        self.assertEqual(code, 0)
        self.assertEqual(len(out.splitlines()), 26)

    def test_no_command(self):
        code, out, _ = _run([])
        self.assertEqual(code, 0)
        self.assertIn("usage", out)


if __name__ == "__main__":
    unittest.main()
