[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "mazechase"
version = "0.1.0"
description = "A small maze-chase arcade game with food, poison and three pursuing ghosts"
requires-python = ">=3.10"
keywords = ["game", "arcade", "maze", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
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
mazechase = "mazechase.game:main"

[tool.hatch.build.targets.wheel]
packages = ["mazechase"]

[tool.pytest.ini_options]
addopts = "-ra"
