"""CLI log inspector: list, read, and validate the generator's log files."""

import argparse
import os
import sys

from loggen.inspector import list_log_files, read_file, validate_files


def main(argv=None):
    parser = argparse.ArgumentParser(description="Inspect generated log files")
    parser.add_argument("--log-file", default=os.environ.get("LOG_FILE", "/var/log/app.log"),
                        help="Path of the active log file")
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--list", action="store_true", help="List the active and rotated files")
    group.add_argument("--read", metavar="FILENAME", help="Read a specific log file")
    group.add_argument("--validate", action="store_true",
                       help="Check every line against the record schema")
    args = parser.parse_args(argv)

    if args.list:
        files = list_log_files(args.log_file)
        if not files:
            print("No log files found.")
            return 0
        log_dir = os.path.dirname(args.log_file)
        for name in files:
            size = os.path.getsize(os.path.join(log_dir, name))
            if size < 1024:
                size_str = f"{size} B"
            elif size < 1024 * 1024:
                size_str = f"{size / 1024:.1f} KB"
            else:
                size_str = f"{size / (1024 * 1024):.1f} MB"
            print(f"  {name}  ({size_str})")

    elif args.read:
        try:
            sys.stdout.write(read_file(args.log_file, args.read))
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

    elif args.validate:
        problems = validate_files(args.log_file)
        if not problems:
            print("All lines valid.")
            return 0
        for filename, line_num, errors in problems:
            print(f"  [{filename}:{line_num}] {'; '.join(errors)}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
