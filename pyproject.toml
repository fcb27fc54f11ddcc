[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sheetlib"
version = "0.1.0"
description = "Small teaching programs: a register VM, a binary heap, sorting, float layouts, number types, a bit set, a chaining hash table and a temp-file shell"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "education",
    "virtual-machine",
    "binary-heap",
    "sorting",
    "ieee-754",
    "rational",
    "complex",
    "bitset",
    "hash-table",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
sheetlib-hello = "sheetlib.hello:main"
sheetlib-bitmath = "sheetlib.bitmath:main"
sheetlib-simplevm = "sheetlib.simplevm:main"
sheetlib-heap = "sheetlib.binary_heap:main"
sheetlib-commandline = "sheetlib.commandline:main"

[tool.hatch.build.targets.wheel]
packages = ["sheetlib"]

[tool.hatch.build.targets.sdist]
include = ["sheetlib", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
