"""Tests for the json-diff-ng command-line interface."""

from __future__ import annotations

import contextlib
import io
import json
import os
import tempfile
import unittest

from json_diff_ng.cli import EXIT_DIFFERENT, EXIT_EQUAL, EXIT_ERROR, main


def _run(argv: list[str]) -> tuple[int, str, str]:
    out = io.StringIO()
    err = io.StringIO()
    code = None
    with contextlib.redirect_stdout(out), contextlib.redirect_stderr(err):
        try:
            main(argv)
        except SystemExit as exc:
            code = exc.code
    return code, out.getvalue(), err.getvalue()


class TestDirectCommand(unittest.TestCase):
    def test_equal_inputs(self):
        code, out, _ = _run(["direct", '{"a": 1}', '{"a": 1}'])
        self.assertEqual(code, EXIT_EQUAL)
        self.assertEqual(out.strip(), "No differences.")

    def test_differences(self):
        code, out, _ = _run(["direct", '{"a": 1, "c": 1}', '{"b": 2, "c": 2}'])
        self.assertEqual(code, EXIT_DIFFERENT)
        self.assertIn("Only in left:\n  .a.(1)", out)
        self.assertIn("Only in right:\n  .b.(2)", out)
        self.assertIn("Value mismatches:\n  .c.(1 != 2)", out)

    def test_sort_arrays(self):
        code, _, _ = _run(["direct", "[1, 2]", "[2, 1]"])
        self.assertEqual(code, EXIT_DIFFERENT)
        code, _, _ = _run(["direct", "[1, 2]", "[2, 1]", "--sort-arrays"])
        self.assertEqual(code, EXIT_EQUAL)
        code, _, _ = _run(["direct", "-s", "[1, 2]", "[2, 1]"])
        self.assertEqual(code, EXIT_EQUAL)

    def test_exclude_key_regex_repeatable(self):
        left = '{"secret": 1, "token": 1, "id": 1}'
        right = '{"secret": 2, "token": 2, "id": 1}'
        code, _, _ = _run(["direct", left, right, "-e", "^secret$"])
        self.assertEqual(code, EXIT_DIFFERENT)
        code, _, _ = _run(
            [
                "direct",
                left,
                right,
                "--exclude-key-regex",
                "^secret$",
                "--exclude-key-regex",
                "^token$",
            ]
        )
        self.assertEqual(code, EXIT_EQUAL)

    def test_json_format(self):
        code, out, _ = _run(["direct", '{"a": 1}', "{}", "--format", "json"])
        self.assertEqual(code, EXIT_DIFFERENT)
        payload = json.loads(out)
        self.assertFalse(payload["equal"])
        self.assertEqual(payload["left_only"], [{"path": ".a", "value": 1}])

    def test_parse_error(self):
        code, out, err = _run(["direct", "{invalid", "{}"])
        self.assertEqual(code, EXIT_ERROR)
        self.assertEqual(out, "")
        self.assertIn("Error:", err)
        self.assertIn("left", err)

    def test_pattern_error(self):
        code, _, err = _run(["direct", "{}", "{}", "-e", "("])
        self.assertEqual(code, EXIT_ERROR)
        self.assertIn("Invalid exclusion pattern", err)

    def test_verbose_logs_progress(self):
        code, _, err = _run(["direct", "{}", "{}", "--verbose"])
        self.assertEqual(code, EXIT_EQUAL)
        self.assertIn("Comparing", err)

    def test_quiet_by_default(self):
        _, _, err = _run(["direct", "{}", "{}"])
        self.assertEqual(err, "")


class TestFileCommand(unittest.TestCase):
    def _write(self, directory: str, name: str, content: str) -> str:
        path = os.path.join(directory, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_compare_files(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            left = self._write(temp_dir, "a.json", '["a", {"c": ["d", "f"]}, "b"]')
            right = self._write(temp_dir, "b.json", '["b", {"c": ["e", "d"]}, "a"]')

            code, out, _ = _run(["file", left, right, "--sort-arrays"])

        self.assertEqual(code, EXIT_DIFFERENT)
        self.assertIn('.[0].c.[1].("f" != "e")', out)

    def test_equal_files(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            left = self._write(temp_dir, "a.json", '{"a": 1, "b": 2}')
            right = self._write(temp_dir, "b.json", '{"b": 2, "a": 1}')

            code, _, _ = _run(["file", left, right])

        self.assertEqual(code, EXIT_EQUAL)

    def test_invalid_utf8_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            left = os.path.join(temp_dir, "a.json")
            with open(left, "wb") as f:
                f.write(b'{"a": "\xff"}')
            right = self._write(temp_dir, "b.json", '{"a": "b"}')

            code, out, err = _run(["file", left, right])

        self.assertEqual(code, EXIT_ERROR)
        self.assertEqual(out, "")
        self.assertIn("not valid UTF-8", err)

    def test_missing_file(self):
        with tempfile.TemporaryDirectory() as temp_dir:
            missing = os.path.join(temp_dir, "missing.json")
            code, _, err = _run(["file", missing, missing])

        self.assertEqual(code, EXIT_ERROR)
        self.assertIn("missing.json", err)


class TestNoCommand(unittest.TestCase):
    def test_prints_help(self):
        code, out, _ = _run([])
        self.assertEqual(code, EXIT_DIFFERENT)
        self.assertIn("usage:", out)


if __name__ == "__main__":
    unittest.main()
