[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "adventsolve"
version = "0.1.0"
description = "Solvers for a set of daily programming puzzles, runnable from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "solver", "command-line"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aoc = "adventsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["adventsolve"]

[tool.pytest.ini_options]
addopts = "-ra"
