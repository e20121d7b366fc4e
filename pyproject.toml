[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gridglue"
version = "0.1.0"
description = "Intersection lists and the merger interface for coupling two non-matching grids"
requires-python = ">=3.10"
dependencies = []
keywords = ["grid", "mesh", "coupling", "intersection", "finite elements", "simplex"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gridglue"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
