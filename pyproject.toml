[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ratnum"
version = "0.1.0"
description = "Exact rational numbers that mix freely with integers, booleans, decimal strings and compact binary encodings."
requires-python = ">=3.10"
dependencies = []
keywords = ["rational", "fraction", "exact arithmetic", "varint", "number"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["ratnum"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
