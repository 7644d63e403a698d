[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ymcommon"
version = "1.0.0"
description = "Common utilities: assertions, null checks, binary search, verbosity masks, timers, file loggers, PCG random numbers, a CSV black box, weak-reference pub/sub and a lock proxy."
requires-python = ">=3.10"
dependencies = []
keywords = ["assertions", "logging", "utilities", "prng", "pcg", "verbosity", "publisher", "subscriber", "ring-buffer"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ymcommon"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
