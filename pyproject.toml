[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordhunt"
version = "0.1.0"
description = "Solver for 4x4 Word Hunt boards: finds every dictionary word traceable through adjacent tiles."
requires-python = ">=3.10"
dependencies = []
keywords = ["word hunt", "boggle", "puzzle", "solver", "trie"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
wordhunt = "wordhunt.solver:main"

[tool.hatch.build.targets.wheel]
packages = ["wordhunt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
