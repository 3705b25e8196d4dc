[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "worldle"
version = "0.1.0"
description = "A small HTTP backend for a country-guessing game: silhouettes, guesses, distances and compass directions."
requires-python = ">=3.10"
keywords = ["game", "geography", "puzzle", "worldle", "flask"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Framework :: Flask",
    "Intended Audience :: End Users/Desktop",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "flask",
    "requests",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
worldle = "worldle.api:main"

[tool.hatch.build.targets.wheel]
packages = ["worldle"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
