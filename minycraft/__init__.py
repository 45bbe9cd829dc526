"""Voxel terrain sandbox: Perlin-noise chunks, blended heightmaps and an OpenGL renderer."""

__version__ = "0.1.0"