[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "reindeer2021"
version = "0.1.0"
description = "Solvers for days 1 to 18 of a 2021 advent puzzle calendar"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "advent", "algorithms", "2021"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
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
reindeer2021-day01 = "reindeer2021.day01:main"
reindeer2021-day02 = "reindeer2021.day02:main"
reindeer2021-day03 = "reindeer2021.day03:main"
reindeer2021-day04 = "reindeer2021.day04:main"
reindeer2021-day05 = "reindeer2021.day05:main"
reindeer2021-day06 = "reindeer2021.day06:main"
reindeer2021-day07 = "reindeer2021.day07:main"
reindeer2021-day08 = "reindeer2021.day08:main"
reindeer2021-day09 = "reindeer2021.day09:main"
reindeer2021-day10 = "reindeer2021.day10:main"
reindeer2021-day11 = "reindeer2021.day11:main"
reindeer2021-day12 = "reindeer2021.day12:main"
reindeer2021-day13 = "reindeer2021.day13:main"
reindeer2021-day14 = "reindeer2021.day14:main"
reindeer2021-day15 = "reindeer2021.day15:main"
reindeer2021-day16 = "reindeer2021.day16:main"
reindeer2021-day17 = "reindeer2021.day17:main"
reindeer2021-day18 = "reindeer2021.day18:main"

[tool.hatch.build.targets.wheel]
packages = ["reindeer2021"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
