[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "qqevol"
version = "0.1.0"
description = "Time evolution of a D-state quantum system driven by an external pulsed field"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = ["quantum", "runge-kutta", "time evolution", "simulation", "physics"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Environment :: Console",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Physics",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
qqevol = "qqevol.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["qqevol"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
