[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "a4engine"
version = "0.1.0"
description = "Core of a small 2D game engine: vectors, matrices, input mapping, spritesheets and model files"
requires-python = ">=3.10"
dependencies = ["lz4"]
keywords = ["game", "engine", "2d", "matrix", "vector", "input", "spritesheet", "model"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["a4engine"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
