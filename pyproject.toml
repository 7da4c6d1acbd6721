[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "algopuzzles"
version = "0.1.0"
description = "Compact solutions to classic algorithm puzzles on arrays, strings, bits, linked lists and binary trees."
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "puzzles", "interview", "data-structures", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["algopuzzles"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
