[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "push_swap"
version = "1.0.0"
description = "Sort integers with two stacks and a limited set of operations, printing the operations used"
requires-python = ">=3.10"
dependencies = []
keywords = ["sorting", "stacks", "algorithm", "puzzle"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
push_swap = "push_swap.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["push_swap"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
