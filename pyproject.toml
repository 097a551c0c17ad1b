[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tictacflow"
version = "0.1.0"
description = "Lazily evaluated call chains and a small tic-tac-toe game model"
requires-python = ">=3.10"
dependencies = []
keywords = ["tic-tac-toe", "board game", "pipeline", "chaining", "combinators"]
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
    "Topic :: Games/Entertainment :: Board Games",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["tictacflow"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
