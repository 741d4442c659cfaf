[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "klondike"
version = "1.0.0"
description = "Klondike solitaire card game with a mouse-driven graphical table"
requires-python = ">=3.10"
keywords = ["solitaire", "klondike", "patience", "cards", "game"]
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
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
klondike = "klondike.app:main"

[tool.hatch.build.targets.wheel]
packages = ["klondike"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
