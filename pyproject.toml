[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "hnswlab"
version = "0.1.0"
description = "Hierarchical navigable small world graphs for approximate nearest-neighbour search, with vector file readers, recall measurement and a compressed radix tree"
requires-python = ">=3.10"
dependencies = []
keywords = ["hnsw", "nearest-neighbour", "ann", "vector-search", "radix-tree", "sift", "recall"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
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
hnswlab = "hnswlab.cli:main"

[tool.setuptools.packages.find]
include = ["hnswlab*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
