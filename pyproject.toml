[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsaccess"
version = "0.1.0"
description = "Navigate a directory tree and create, list and remove files and directories"
requires-python = ">=3.10"
dependencies = []
keywords = ["filesystem", "directory", "navigation", "files"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Filesystems",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fsaccess = "fsaccess.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fsaccess"]

[tool.pytest.ini_options]
addopts = "-ra"
