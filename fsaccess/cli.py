"""Command that exercises directory operations under a given path."""

from __future__ import annotations

import argparse

from .access import FSAccess
from .paths import DEFAULT_PATH
from .types import FilterType


def main(argv: list[str] | None = None) -> int:
    """List a directory, then create, enter, fill and remove scratch directories in it."""
    parser = argparse.ArgumentParser(prog="fsaccess")
    parser.add_argument("path", nargs="?", default=DEFAULT_PATH)
    args = parser.parse_args(argv)

    fs = FSAccess(args.path)
    fs.print_files_in_current_dir()
    fs.change_filter_type(FilterType.NON_UTILITY)

    print()

    fs.make_directory("new_dir1")
    fs.make_directory("new_dir")
    fs.change_directory("new_dir")

    fs.print_files_in_current_dir()

    fs.create_file("test.txt")
    fs.create_file("test2.txt")
    fs.remove_file("test.txt")

    fs.print_files_in_current_dir()

    fs.change_directory("..")
    fs.change_directory("new_dir1")

    for name in ("to_rm1", "to_rm2", "to_rm3"):
        fs.create_file(name)

    fs.change_directory("..")

    fs.remove_directory("new_dir1")
    fs.remove_directory("new_dir")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())