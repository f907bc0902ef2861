[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dnasolve"
version = "0.1.0"
description = "Sequence analysis toolkit for classic bioinformatics problems: FASTA parsing, GC content, translation, ORFs, assembly and more."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "bioinformatics",
    "dna",
    "rna",
    "fasta",
    "sequence-analysis",
    "genome-assembly",
    "open-reading-frame",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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
test = ["pytest"]

[project.scripts]
dnasolve = "dnasolve.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["dnasolve"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
