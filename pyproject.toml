[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "placar"
version = "0.1.0"
description = "Football championship results: team standings and match queries from CSV files"
requires-python = ">=3.10"
dependencies = []
keywords = ["football", "soccer", "championship", "standings", "csv"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Portuguese (Brazilian)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
placar = "placar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["placar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
