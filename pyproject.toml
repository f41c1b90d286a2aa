[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tmprint"
version = "0.1.0"
description = "Send text to an Epson TM-T88V receipt printer over raw TCP, line by line"
requires-python = ">=3.10"
dependencies = []
keywords = ["epson", "tm-t88v", "receipt", "printer", "escpos", "thermal"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Printing",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tmprint = "tmprint.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tmprint"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
