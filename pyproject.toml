[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "questbook"
version = "0.1.0"
description = "Solvers for days 2 to 16 of a season of three-part programming puzzles, with a command that runs them against your input files."
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "programming-puzzles", "quests", "algorithms"]
classifiers = [
    "Development Status :: 4 - Beta",
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
questbook = "questbook.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["questbook"]

[tool.pytest.ini_options]
addopts = "-ra"
