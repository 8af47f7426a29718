[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qcomputations"
version = "0.1.0"
description = "Dense matrices, quantum state operators, basis discovery and diagnostics for small quantum system simulations"
requires-python = ">=3.10"
keywords = ["quantum", "physics", "matrix", "operators", "qudit", "simulation"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Physics",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["qcomputations"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
