[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "piatnashki"
version = "1.0.0"
description = "The fifteen sliding puzzle with undo, redo and saved sessions"
requires-python = ">=3.10"
dependencies = []
keywords = ["fifteen", "puzzle", "sliding puzzle", "game", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
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
piatnashki = "piatnashki.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["piatnashki"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
