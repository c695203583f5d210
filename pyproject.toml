[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wordlehelper"
version = "1.0.0"
description = "List the five-letter words from a word list that fit what you know about a Wordle puzzle."
requires-python = ">=3.10"
dependencies = []
keywords = ["wordle", "puzzle", "word game", "solver", "helper"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: English",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wordle-helper = "wordlehelper.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["wordlehelper"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
strict = true
