[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "twopointers"
version = "1.0.0"
description = "Two-pointer and sliding-window algorithms on lists and strings"
requires-python = ">=3.10"
dependencies = []
keywords = ["algorithms", "two pointers", "sliding window", "arrays", "strings"]
classifiers = [
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["twopointers"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
