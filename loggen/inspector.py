"""Inspector logic: list, read, and validate the active and rotated log files."""

import os
import re

from loggen.validator import LineValidator


def _rotation_index(name: str, base: str) -> int | None:
    m = re.fullmatch(re.escape(base) + r"\.(\d+)", name)
    return int(m.group(1)) if m else None


def list_log_files(log_file: str) -> list[str]:
    """Return the active file then rotated files, newest (index 1) first."""
    log_dir = os.path.dirname(log_file) or "."
    base = os.path.basename(log_file)
    if not os.path.isdir(log_dir):
        return []

    rotated = []
    for name in os.listdir(log_dir):
        index = _rotation_index(name, base)
        if index is not None:
            rotated.append((index, name))
    rotated.sort()

    files = [base] if os.path.isfile(log_file) else []
    files.extend(name for _, name in rotated)
    return files


def read_file(log_file: str, filename: str) -> str:
    """Read one of the files ``list_log_files`` reports; any other name is not found."""
    path = os.path.join(os.path.dirname(log_file), filename)
    if filename not in list_log_files(log_file):
        raise FileNotFoundError(f"File not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def validate_files(log_file: str, validator: LineValidator | None = None) -> list[tuple[str, int, list[str]]]:
    """Validate every line of every log file. Returns (filename, line_num, errors) for bad lines."""
    validator = validator or LineValidator()
    log_dir = os.path.dirname(log_file)
    problems = []
    for filename in list_log_files(log_file):
        path = os.path.join(log_dir, filename)
        with open(path, "r", encoding="utf-8") as f:
            for line_num, line in enumerate(f, 1):
                ok, errors = validator.validate_line(line.rstrip("\n"))
                if not ok:
                    problems.append((filename, line_num, errors))
    return problems
