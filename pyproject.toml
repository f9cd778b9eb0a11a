[build-system]
requires = ["setuptools>=61"]
build-backend = "setuptools.build_meta"

[project]
name = "gridsearch"
version = "0.1.0"
description = "Interactive visualizer for graph search algorithms on a square grid, with path smoothing"
requires-python = ">=3.10"
dependencies = []
keywords = ["pathfinding", "a-star", "dijkstra", "bfs", "dfs", "grid", "visualization"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Visualization",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
gridsearch = "gridsearch.app:main"

[tool.setuptools.packages.find]
include = ["gridsearch*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
