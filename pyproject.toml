[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "matrixkit"
version = "0.1.0"
description = "Small integer-matrix toolkit: products, sorting, sums, searching and classification, with a command that reads matrices from standard input."
requires-python = ">=3.10"
dependencies = []
keywords = ["matrix", "linear algebra", "education", "integer matrix"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
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
matrixkit = "matrixkit.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["matrixkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
