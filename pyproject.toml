[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "hexmapper"
version = "0.1.0"
description = "Hex tile maps with A* path finding, a small 3D math kit and a scene and window model"
requires-python = ">=3.10"
dependencies = []
keywords = ["hex", "hexagon", "map", "astar", "pathfinding", "3d", "matrix", "scene", "icosphere"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Turn Based Strategy",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["hexmapper*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
