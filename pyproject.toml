[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "koalagraphs"
version = "0.1.0"
description = "Graph algorithms: graph file formats, induced path search, set cover, dominating sets and perfect graph recognition"
requires-python = ">=3.10"
keywords = [
    "graph",
    "graph6",
    "sparse6",
    "digraph6",
    "dimacs",
    "perfect graphs",
    "berge graphs",
    "dominating set",
    "set cover",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
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
dependencies = [
    "networkx",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["koalagraphs"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
