[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lemin"
version = "1.0.0"
description = "Ant farm solver: reads a farm of rooms and tunnels and moves ants from start to end along the shortest route"
requires-python = ">=3.10"
dependencies = []
keywords = ["lem-in", "ants", "graph", "shortest-path", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
lem-in = "lemin.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["lemin"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
