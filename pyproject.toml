[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternbench"
version = "0.1.0"
description = "Time threaded counting of a pattern in a large text file, using Boyer-Moore whole-word search or a finite automaton."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "benchmark",
    "boyer-moore",
    "finite automaton",
    "pattern matching",
    "string search",
    "threads",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Benchmark",
    "Topic :: Text Processing :: General",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternbench = "patternbench.bench:main"

[tool.hatch.build.targets.wheel]
packages = ["patternbench"]

[tool.hatch.build.targets.sdist]
include = ["patternbench", "tests", "pyproject.toml", "README.md"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
