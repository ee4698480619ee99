[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cosmicdodger"
version = "0.1.0"
description = "Pieces of a 2D arcade game: a ship, meteors, pickups, a HUD and a small entity/component engine."
requires-python = ">=3.10"
keywords = ["game", "arcade", "pygame", "shooter", "meteors", "entity-component"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cosmicdodger"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
