[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "trivia"
version = "0.1.0"
description = "A console trivia game for two to four players, with a persistent high-score table"
requires-python = ">=3.10"
dependencies = []
keywords = ["trivia", "quiz", "game", "console", "multiplayer"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Spanish",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
trivia = "trivia.juego:main"

[tool.hatch.build.targets.wheel]
packages = ["trivia"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
