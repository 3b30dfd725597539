[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slidetile"
version = "0.1.0"
description = "A* solver for the 3x3 sliding tile (8-puzzle) game"
requires-python = ">=3.10"
dependencies = []
keywords = ["8-puzzle", "sliding puzzle", "a-star", "search", "puzzle"]
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
slidetile = "slidetile.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["slidetile"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
