[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "dominion-sim"
version = "0.1.0"
description = "A simulation of the Dominion deck-building card game with a deterministic random number generator, an interactive shell and a scripted two-player game."
requires-python = ">=3.10"
dependencies = []
keywords = ["dominion", "card game", "deck building", "simulation", "board game"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dominion-play = "dominion_sim.player:main"
dominion-auto = "dominion_sim.playdom:main"
dominion-rt = "dominion_sim.rt:main"

[tool.setuptools.packages.find]
include = ["dominion_sim*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
