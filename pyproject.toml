[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hotrace"
version = "0.1.0"
description = "Key/value lookup from standard input: load pairs, then answer searches."
requires-python = ">=3.10"
dependencies = []
keywords = ["hashmap", "lookup", "key-value", "stdin", "filter"]
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
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hotrace = "hotrace.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hotrace"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"
