[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "marketgraph"
version = "0.1.0"
description = "Eigenvector centrality, graph value and reputation scoring for marketplace transaction graphs"
requires-python = ">=3.10"
dependencies = []
keywords = ["eigenvector centrality", "power iteration", "reputation", "marketplace", "graph"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
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
marketgraph = "marketgraph.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["marketgraph"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
