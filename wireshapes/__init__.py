"""Wireframe line meshes for debug drawing of collision shapes."""

__version__ = "0.1.0"
__all__ = ["mesh", "debugdraw"]