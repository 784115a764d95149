[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "growing-dags"
version = "0.1.0"
description = "Grow a partial pathway DAG inside a weighted interactome, one cheapest path at a time."
requires-python = ">=3.10"
dependencies = [
    "networkx",
]
keywords = ["interactome", "pathway", "dag", "protein-protein interaction", "graph", "shortest path"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Bio-Informatics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
growing-dags = "growing_dags.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["growing_dags"]

[tool.pytest.ini_options]
addopts = "-ra"
