[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "bookport"
version = "0.1.0"
description = "A small command-line library lending system backed by plain text files"
requires-python = ">=3.10"
dependencies = []
keywords = ["library", "books", "lending", "cli"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bookport = "bookport.cli:main"

[tool.setuptools.packages.find]
include = ["bookport*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
