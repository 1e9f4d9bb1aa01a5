[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fsearch"
version = "0.1.0"
description = "Parallel file search that walks a directory tree and filters entry names by regular expression"
requires-python = ">=3.10"
dependencies = []
keywords = ["find", "search", "files", "regex", "walk", "directory"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Intended Audience :: System Administrators",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fs = "fsearch.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["fsearch"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
