[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numdiffer"
version = "0.1.0"
description = "Building blocks for comparing similar files: a line diff, decimal error arithmetic and bit vectors"
requires-python = ">=3.10"
dependencies = []
keywords = ["diff", "myers", "numeric", "relative error", "decimal", "bitvector"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Filters",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["numdiffer"]

[tool.pytest.ini_options]
addopts = "-ra"
