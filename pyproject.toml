[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tablefilter"
version = "0.1.0"
description = "Filter two comma- or space-separated integer tables by key and time a map-based and a direct filtering strategy"
requires-python = ">=3.10"
dependencies = []
keywords = ["table", "filter", "select", "benchmark", "csv"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Database",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
tablefilter = "tablefilter.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["tablefilter"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
