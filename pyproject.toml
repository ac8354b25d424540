[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rayquest"
version = "0.1.0"
description = "A small grid-based raycasting engine with a top-down minimap and a first-person wall view"
requires-python = ">=3.10"
keywords = ["raycasting", "game", "pygame", "first-person", "tile map"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: First Person Shooters",
]
dependencies = [
    "pygame>=2.1",
]

[project.optional-dependencies]
test = [
    "pytest>=7",
]

[project.scripts]
rayquest = "rayquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["rayquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
