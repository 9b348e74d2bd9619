[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "ojkit"
version = "0.1.0"
description = "Solutions to classic online-judge and kata puzzles, usable as a library or from the command line"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzles", "kata", "online-judge", "algorithms", "exercises"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
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
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ojkit = "ojkit.cli:main"

[tool.setuptools.packages.find]
include = ["ojkit*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
