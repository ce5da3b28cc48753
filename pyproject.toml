[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cub3d"
version = "0.1.0"
description = "Core pieces of a small raycasting first-person engine: player movement, key handling, line reading and error reporting."
requires-python = ">=3.10"
dependencies = []
keywords = ["raycasting", "game", "first-person", "player", "movement"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["cub3d"]

[tool.hatch.build.targets.sdist]
include = ["cub3d", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
