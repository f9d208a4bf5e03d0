[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "minigames"
version = "0.1.0"
description = "A small collection of arcade minigames: snake, pong, asteroid and tic-tac-toe"
requires-python = ">=3.10"
keywords = ["games", "arcade", "snake", "pong", "asteroids", "tic-tac-toe", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
minigames = "minigames.app:main"

[tool.hatch.build.targets.wheel]
packages = ["minigames"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
