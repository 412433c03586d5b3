[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "whistgame"
version = "0.1.0"
description = "Rules engine and computer opponent for the bidding card game Whist (1-8-1 and 8-1-8)"
requires-python = ">=3.10"
dependencies = []
keywords = ["whist", "card game", "trick-taking", "game engine", "ai"]
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
    "Topic :: Games/Entertainment :: Board Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["whistgame"]

[tool.pytest.ini_options]
addopts = "-ra"
