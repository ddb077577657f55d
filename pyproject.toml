[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "settingup"
version = "0.1.0"
description = "Find and mark the largest empty square in a grid of obstacles"
requires-python = ">=3.10"
dependencies = []
keywords = ["puzzle", "grid", "largest-square", "dynamic-programming"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
setting_up = "settingup.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["settingup"]

[tool.pytest.ini_options]
addopts = "-ra"
