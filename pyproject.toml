[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "practicum"
version = "1.0.0"
description = "Introductory programming exercises and a digital integrated circuit console simulator"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "exercises",
    "education",
    "boolean-logic",
    "truth-table",
    "circuit-simulator",
    "number-systems",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
practicum-simulator = "practicum.simulator:main"
practicum-attendance = "practicum.attendance:main"
practicum-floats = "practicum.floating:main"
practicum-circle = "practicum.cli_tools:circle_main"
practicum-calc = "practicum.cli_tools:calculator_main"
practicum-count = "practicum.cli_tools:count_main"

[tool.hatch.build.targets.wheel]
packages = ["practicum"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
