[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parityworkers"
version = "0.1.0"
description = "Generate unique random numbers across worker threads and report them sorted by parity"
requires-python = ">=3.10"
dependencies = []
keywords = ["threads", "random", "parity", "even", "odd", "configuration"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
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
parityworkers = "parityworkers.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["parityworkers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
