"""Readers for DTEX and PVR textures, 24-bit BMP images and scene data, with small fixed-capacity containers."""

__version__ = "0.1.0"