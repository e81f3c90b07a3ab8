[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "densematrix"
version = "0.1.0"
description = "Small dense matrix library: arithmetic, row operations, matrix exponential and Gaussian elimination"
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear algebra", "gaussian elimination", "matrix exponential"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
densematrix-demo = "densematrix.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["densematrix"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
