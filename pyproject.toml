[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fighter_anim"
version = "0.1.0"
description = "Sprite-based attack animations and a character selection screen for a small fighting game"
requires-python = ">=3.10"
dependencies = ["pygame"]
keywords = ["game", "animation", "sprites", "pygame", "fighting"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: End Users/Desktop",
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
fighter-viewer = "fighter_anim.viewer:main"
fighter-loop = "fighter_anim.loop_demo:main"
fighter-select = "fighter_anim.selection:main"

[tool.hatch.build.targets.wheel]
packages = ["fighter_anim"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
