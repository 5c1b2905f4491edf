[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "parking2d"
version = "0.1.0"
description = "Game logic for a 2D top-down parking game: objects, collisions, scoring, sound state and menu state"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["game", "parking", "simulation", "2d", "collision"]
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
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.setuptools.packages.find]
include = ["parking2d*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
