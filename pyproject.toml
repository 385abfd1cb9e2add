[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slidepuzzle"
version = "1.0.0"
description = "Terminal sliding-tile (15) puzzle with custom maps, undo mode and session logs"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "15-puzzle", "sliding-puzzle", "game", "terminal"]
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
slidepuzzle = "slidepuzzle.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["slidepuzzle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
