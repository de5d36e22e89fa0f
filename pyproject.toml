[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rubik"
version = "0.1.0"
description = "Rubik's Cube model with bit-packed state, move parsing, terminal rendering and pruning tables"
requires-python = ">=3.10"
dependencies = []
keywords = ["rubik", "cube", "puzzle", "kociemba", "pruning"]
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
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
rubik = "rubik.controller:main"

[tool.hatch.build.targets.wheel]
packages = ["rubik"]

[tool.pytest.ini_options]
addopts = "-ra"
