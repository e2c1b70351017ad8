"""Hex tile maps with A* path finding, 3D vector and matrix maths, meshes, and a scene, window and application model."""

__version__ = "0.1.0"