[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "yukifight"
version = "0.1.0"
description = "Game logic for a small top-down snowman action game, with a pygame window for its title and scene flow."
requires-python = ">=3.10"
keywords = ["game", "arcade", "shooter", "pygame", "2d", "snowman"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
yukifight = "yukifight.app:main"

[tool.hatch.build.targets.wheel]
packages = ["yukifight"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
