[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bazaarquest"
version = "0.1.0"
description = "A terminal trading game: roam a zoned market, visit merchants and trade goods on a limited action-point budget."
requires-python = ">=3.10"
dependencies = []
keywords = ["game", "trading", "terminal", "console", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Simulation",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bazaarquest = "bazaarquest.game:main"

[tool.hatch.build.targets.wheel]
packages = ["bazaarquest"]

[tool.pytest.ini_options]
addopts = "-ra"
