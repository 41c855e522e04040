[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "booklib"
version = "0.1.0"
description = "A small library-lending manager backed by SQLite: users, books and rentals."
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "rentals", "lending", "sqlite"]
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
    "Topic :: Office/Business",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
booklib = "booklib.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["booklib"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
