[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bjsim"
version = "0.1.0"
description = "Blackjack shoe simulator with basic strategy play and Wong Halves card counting logs"
requires-python = ">=3.10"
dependencies = []
keywords = ["blackjack", "simulation", "card-counting", "basic-strategy", "monte-carlo"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bjsim = "bjsim.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["bjsim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
