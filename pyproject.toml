[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bngraph"
version = "0.1.0"
description = "Graph and data primitives for Bayesian network structure learning"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bayesian-network",
    "graph",
    "dag",
    "cpdag",
    "structure-learning",
    "statistics",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bngraph"]

[tool.pytest.ini_options]
addopts = "-ra"
