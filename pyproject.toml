[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "timesupporter"
version = "0.1.0"
description = "Game logic for a side-scrolling action game: stage objects, attacks, items, event conditions, input recording and save data"
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "platformer", "side-scrolling", "collision", "replay"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Side-Scrolling/Arcade Games",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["timesupporter"]

[tool.pytest.ini_options]
addopts = "-ra"
