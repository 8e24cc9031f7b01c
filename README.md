# fsaccess

A small file-system navigator. It keeps a current directory together with the
path it was reached from. It lets you list, create and remove files and
directories relative to that directory. Listings can be filtered to hide
entries whose names start with a dot, or to hide only the `.` and `..` entries.

The package needs a POSIX system, because it works through directory file
descriptors.

## Installation

```
pip install .
```

## Command line

```
fsaccess [PATH]
```

The command starts at `PATH`. When `PATH` is left out it starts at the
file-system root `/`. It then runs a fixed sequence of steps:

1. It lists the directory, hiding entries whose names start with a dot.
2. It switches the filter so that only `.` and `..` are hidden.
3. It creates `new_dir1` and `new_dir`.
4. In `new_dir` it creates `test.txt` and `test2.txt`, then removes `test.txt`. It lists `new_dir` before and after.
5. It creates `to_rm1`, `to_rm2` and `to_rm3` in `new_dir1`.
6. It removes both directories again, together with their contents.

Failures are reported on standard output and do not stop the run.

## Library use

```python
from fsaccess.access import FSAccess
from fsaccess.types import FilterType

fs = FSAccess("/tmp")
fs.print_files_in_current_dir()

fs.change_filter_type(FilterType.NON_UTILITY)
fs.make_directory("work")
fs.change_directory("work")
fs.create_file("notes.txt")
print(fs.files_in_dir())      # ['notes.txt']
fs.change_directory("..")
fs.remove_directory("work")
```

### `fsaccess.access.FSAccess(path="/", out=None)`

This is a viewer with a current directory, held in `path` as a `CurrentPath`, and a `Settings` object. Failed operations are not raised. They write a report to `out`, which is standard output when `out` is `None`.

Its methods are:

- `files_in_dir()` returns the sorted names in the current directory that pass the current filter.
- `print_files_in_current_dir()` writes those names one per line. It writes `No files` when nothing passes the filter.
- `change_filter_type(filter_type)` sets the filter used for listings.
- `change_directory(name)` enters a subdirectory. `".."` goes up one level and `"."` stays where it is.
- `make_directory(name)` creates a directory with mode `0o755`.
- `create_file(name)` creates a file with mode `0o744`. An existing file is left as it is.
- `remove_file(name)` removes a file.
- `remove_directory(name)` removes a directory and everything in it.

`fsaccess.access.describe_error(error, function_name)` builds a report for an error. A typical report is `Permission denied in make_directory`, followed by a line `Additional message is: <path>`.

### Filters (`fsaccess.types.FilterType`, `fsaccess.filters`)

- `FilterType.ALL` (`filter_all`) shows every entry, `.` and `..` included.
- `FilterType.VISIBLE` (`filter_visible`) shows entries whose names do not start with a dot. This is the default.
- `FilterType.NON_UTILITY` (`filter_local`) shows every entry except `.` and `..`.

`resolve_filter(filter_type)` returns the matching name filter. Unknown values fall back to `filter_all`.

### Lower-level helpers (`fsaccess.paths`)

`CurrentPath(path, previous=None)` is a directory path that always ends in a single slash. Its methods are:

- `add(entry)` gives the path one level down.
- `up()` gives the parent directory. The root stays at `/`.
- `back()` gives the path this one was reached from.

The helpers that act on the file system are:

- `list_entries`
- `find_entry`
- `print_files_in_dir`
- `make_directory`
- `change_directory`
- `create_file`
- `remove_file`
- `remove_directory`
- `remove_all_files_from_dir`

`change_directory` returns the new `CurrentPath`.

These helpers raise `fsaccess.types.FSError` instead of printing. An `FSError` carries an `ErrorCode` in `code` and the path involved in `message`. `open_error` and `unlink_error` turn an `OSError` into an `FSError`.

A directory that holds an entry that is neither a regular file nor a directory, such as a symbolic link, is not removed. That case raises an `FSError` with code `SOMETHING_WENT_WRONG`.

## What it does not do

- It has no interactive mode. The command only runs the fixed sequence above.
- It cannot copy, move or rename entries.
- It cannot read or write file contents.

## Tests

```
pip install .[test]
pytest
```