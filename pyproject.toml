[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "slidepuzzle"
version = "0.1.0"
description = "A sliding tile puzzle game with 3x3, 4x4 and 5x5 boards, built on pygame"
requires-python = ">=3.10"
keywords = ["puzzle", "15-puzzle", "sliding-puzzle", "game", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
slidepuzzle = "slidepuzzle.game:main"

[tool.hatch.build.targets.wheel]
packages = ["slidepuzzle"]

[tool.pytest.ini_options]
addopts = "-ra"
