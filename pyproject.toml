[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "rvqsort"
version = "0.1.0"
description = "Fixed 2048-element integer dataset for a quicksort benchmark, with its sorted reference"
requires-python = ">=3.10"
dependencies = []
keywords = ["quicksort", "benchmark", "sorting", "dataset"]
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
    "Topic :: System :: Benchmark",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["rvqsort"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
