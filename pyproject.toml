[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bivkzg"
version = "0.1.0"
description = "Bivariate polynomial arithmetic over the BLS12-381 scalar field, as used by KZG commitments"
requires-python = ">=3.10"
dependencies = []
keywords = ["kzg", "polynomial", "bivariate", "bls12-381", "finite field", "cryptography"]
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
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["bivkzg"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
