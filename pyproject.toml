[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marsquest"
version = "0.1.0"
description = "Building blocks of a text-mode Mars survival game on a simulated switch-and-display board"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "text-adventure", "survival", "mars", "simulation"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Role-Playing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["marsquest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
