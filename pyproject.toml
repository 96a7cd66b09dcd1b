[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "maodie"
version = "0.1.0"
description = "A small top-down arcade shooter: survive the timer while orcs close in from the edges of the arena."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame", "sprites"]
classifiers = [
    "Development Status :: 3 - Alpha",
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
maodie = "maodie.app:main"

[tool.hatch.build.targets.wheel]
packages = ["maodie"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
