[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chesscore"
version = "0.1.0"
description = "Chess board, pieces and move rules with a small console game launcher"
requires-python = ">=3.10"
dependencies = []
keywords = ["chess", "board game", "game", "console"]
classifiers = [
    "Development Status :: 2 - Pre-Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
chesscore = "chesscore.game:main"

[tool.hatch.build.targets.wheel]
packages = ["chesscore"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
