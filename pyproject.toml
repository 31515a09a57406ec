[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hexmaze"
version = "0.1.0"
description = "A small maze-chasing arcade game: eat every pellet and dodge the wandering ghosts."
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["game", "arcade", "maze", "pygame"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Environment :: X11 Applications",
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

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hexmaze = "hexmaze.game:main"

[tool.hatch.build.targets.wheel]
packages = ["hexmaze"]

[tool.pytest.ini_options]
addopts = "-ra"
