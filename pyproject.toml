[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "morphlattice"
version = "0.1.0"
description = "Lattice, N-best search, option parsing and output formatting for morphological analysis"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "morphological analysis",
    "lattice",
    "n-best",
    "part-of-speech",
    "option parsing",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Linguistic",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["morphlattice"]

[tool.hatch.build.targets.sdist]
include = ["morphlattice", "tests", "README.md"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
