[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "filtermaker"
version = "0.1.0"
description = "Generate item loot filters from tiered item lists and a few switches."
requires-python = ">=3.10"
dependencies = []
keywords = ["loot filter", "item filter", "game", "generator"]
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
    "Topic :: Games/Entertainment",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
filter-maker = "filtermaker.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["filtermaker"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
