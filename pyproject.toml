[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dasel"
version = "1.24.0"
description = "Selector conditions, typed command line values and a self-updater for the dasel tool."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "selector",
    "query",
    "conditions",
    "cli",
    "self-update",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
dasel = "dasel.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dasel"]

[tool.hatch.build.targets.sdist]
include = ["dasel", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
