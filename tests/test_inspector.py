"""Tests for the validator, inspector module and inspector CLI."""

import json
import os
import shutil
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO

import log_inspector
from loggen.config import Config
from loggen.models import Level, LogRecord
from loggen.validator import LineValidator
from loggen.inspector import list_log_files, read_file, validate_files
from loggen.writer import RotatingFileWriter

VALID_LINE = json.dumps({
    "timestamp": "2024-01-15T10:30:00Z",
    "level": "INFO",
    "service": "auth-service",
    "message": "User logged in",
    "status_code": 200,
})


class TestLineValidator(unittest.TestCase):
    def test_valid_line(self):
        validator = LineValidator()
        self.assertEqual(validator.validate_line(VALID_LINE), (True, []))

    def test_invalid_json(self):
        ok, errors = LineValidator().validate_line("{not json")
        self.assertFalse(ok)
        self.assertTrue(errors[0].startswith("invalid JSON"))

    def test_rejects_null_and_empty_optional_fields(self):
        validator = LineValidator()
        for extra in ({"user_id": None}, {"region": ""}, {"status_code": 0}):
            entry = json.loads(VALID_LINE)
            entry.update(extra)
            ok, _ = validator.validate_line(json.dumps(entry))
            self.assertFalse(ok, extra)

    def test_rejects_missing_level_and_unknown_keys(self):
        validator = LineValidator()
        entry = json.loads(VALID_LINE)
        del entry["level"]
        entry["extra"] = 1
        ok, errors = validator.validate_line(json.dumps(entry))
        self.assertFalse(ok)
        self.assertEqual(len(errors), 2)

    def test_stats(self):
        validator = LineValidator()
        validator.validate_line(VALID_LINE)
        validator.validate_line("nope")
        self.assertEqual(validator.get_stats(), {"total": 2, "valid": 1, "invalid": 1})


class InspectorTestCase(unittest.TestCase):
    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()
        self.path = os.path.join(self.tmpdir, "app.log")

    def tearDown(self):
        shutil.rmtree(self.tmpdir)

    def _touch(self, name, content=""):
        with open(os.path.join(self.tmpdir, name), "w") as f:
            f.write(content)


class TestListAndRead(InspectorTestCase):
    def test_lists_active_then_rotated_by_index(self):
        for name in ("app.log", "app.log.10", "app.log.2", "app.log.1",
                     "app.log.lock", "app.log.bak", "other.log"):
            self._touch(name)
        self.assertEqual(
            list_log_files(self.path),
            ["app.log", "app.log.1", "app.log.2", "app.log.10"],
        )

    def test_missing_directory(self):
        self.assertEqual(list_log_files(os.path.join(self.tmpdir, "none", "app.log")), [])

    def test_read_file(self):
        self._touch("app.log.1", "hello\n")
        self.assertEqual(read_file(self.path, "app.log.1"), "hello\n")
        with self.assertRaises(FileNotFoundError):
            read_file(self.path, "app.log.9")

    def test_read_rejects_names_outside_log_set(self):
        fd, outside = tempfile.mkstemp(dir=os.path.dirname(self.tmpdir), suffix=".txt")
        os.close(fd)
        self.addCleanup(os.remove, outside)
        self._touch("app.log", "x\n")
        self._touch("app.log.lock")
        self._touch("notes.txt", "private\n")

        relative = os.path.join("..", os.path.basename(outside))
        for name in (relative, outside, "app.log.lock", "notes.txt", "./app.log"):
            with self.assertRaises(FileNotFoundError, msg=name):
                read_file(self.path, name)


class TestValidateFiles(InspectorTestCase):
    def test_writer_output_is_valid(self):
        writer = RotatingFileWriter(Config(log_file=self.path, max_file_size_bytes=200, max_files=3))
        for i in range(12):
            writer.write(LogRecord(level=Level.ERROR, service="svc", message=f"m{i}",
                                   endpoint="/api/cart", status_code=503))
        self.assertGreater(len(list_log_files(self.path)), 1)
        self.assertEqual(validate_files(self.path), [])

    def test_reports_bad_lines(self):
        self._touch("app.log", VALID_LINE + "\n")
        self._touch("app.log.1", VALID_LINE + "\n" + "garbage\n")
        problems = validate_files(self.path)
        self.assertEqual(len(problems), 1)
        self.assertEqual(problems[0][:2], ("app.log.1", 2))


class TestCli(InspectorTestCase):
    def _run(self, *args):
        out = StringIO()
        with redirect_stdout(out):
            code = log_inspector.main(["--log-file", self.path, *args])
        return code, out.getvalue()

    def test_list(self):
        self._touch("app.log", "x" * 10)
        code, out = self._run("--list")
        self.assertEqual(code, 0)
        self.assertIn("app.log  (10 B)", out)

    def test_read_outside_log_dir_fails(self):
        self._touch("app.log", "x\n")
        err = StringIO()
        with redirect_stderr(err):
            code, out = self._run("--read", "../app.log")
        self.assertEqual((code, out), (1, ""))
        self.assertIn("File not found", err.getvalue())

    def test_validate_exit_codes(self):
        self._touch("app.log", VALID_LINE + "\n")
        self.assertEqual(self._run("--validate"), (0, "All lines valid.\n"))
        self._touch("app.log.1", "bad\n")
        code, out = self._run("--validate")
        self.assertEqual(code, 1)
        self.assertIn("[app.log.1:1]", out)


if __name__ == "__main__":
    unittest.main()
