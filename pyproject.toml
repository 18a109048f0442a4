[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "numtoys"
version = "0.1.0"
description = "Small number experiments: arithmetic derivatives, prime finite differences, byte packing, random runs and a tiny record store"
requires-python = ">=3.10"
dependencies = []
keywords = ["primes", "arithmetic derivative", "finite differences", "sieve", "number theory", "rand"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
numtoys-adboxes = "numtoys.adboxes:main"
numtoys-bran = "numtoys.bran:main"
numtoys-magoo = "numtoys.magoo:main"
numtoys-primediffs = "numtoys.primediffs:main"
numtoys-runs = "numtoys.runs:main"

[tool.hatch.build.targets.wheel]
packages = ["numtoys"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
