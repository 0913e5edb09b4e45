[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cubealgo"
version = "0.1.0"
description = "Algorithm generator for the 3x3x3 Rubik's Cube using a meet-in-the-middle search"
requires-python = ">=3.10"
dependencies = []
keywords = ["rubiks-cube", "puzzle", "solver", "algorithm", "speedcubing"]
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
cubealgo = "cubealgo.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["cubealgo"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
