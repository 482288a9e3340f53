[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rustybunny"
version = "0.1.0"
description = "A small terminal game: hop the bunny across hedges and drifting logs to reach the goal."
requires-python = ">=3.10"
keywords = ["game", "terminal", "arcade", "frogger", "console"]
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
    "Topic :: Games/Entertainment :: Arcade",
]
dependencies = [
    "blessed",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
rustybunny = "rustybunny.game:main"

[tool.hatch.build.targets.wheel]
packages = ["rustybunny"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
