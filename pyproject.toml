[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dsabasics"
version = "0.1.0"
description = "Small, readable implementations of beginner data-structures and algorithms exercises: patterns, maths, recursion, hashing and sorting."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "sorting",
    "recursion",
    "patterns",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
dsa-patterns = "dsabasics.patterns:main"
dsa-math = "dsabasics.basic_math:main"
dsa-recursion = "dsabasics.recursion:main"
dsa-sorting = "dsabasics.sorting:main"
dsa-hashing = "dsabasics.hashing:main"
dsa-extras = "dsabasics.extras:main"

[tool.hatch.build.targets.wheel]
packages = ["dsabasics"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
