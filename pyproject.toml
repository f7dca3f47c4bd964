[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rushsolve"
version = "0.1.0"
description = "Rush Hour puzzle solver using uniform-cost, greedy best-first and A* search"
requires-python = ">=3.10"
dependencies = []
keywords = ["rush-hour", "puzzle", "solver", "search", "a-star", "ucs", "gbfs"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
rushsolve = "rushsolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["rushsolve"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
