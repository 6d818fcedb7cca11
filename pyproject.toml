[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "aprioriminer"
version = "0.1.0"
description = "Frequent itemset mining with the Apriori algorithm over CSV transaction files"
requires-python = ">=3.10"
dependencies = []
keywords = ["apriori", "frequent itemsets", "data mining", "market basket", "csv"]
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
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
aprioriminer = "aprioriminer.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["aprioriminer"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
