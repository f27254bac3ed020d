"""Meshes, textures, assets and player movement for a small 3D scene."""

__version__ = "0.1.0"
__all__ = ["assets", "controls", "debugtext", "game", "geometry", "image", "vmath"]