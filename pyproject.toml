[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sas2parser"
version = "1.3.6"
description = "Read and write Salt and Sacrifice save files and game data catalogs"
requires-python = ">=3.10"
dependencies = []
keywords = ["save-editor", "binary-format", "game-data", "salt-and-sacrifice"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Role-Playing",
    "Topic :: File Formats",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sas2parser"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
