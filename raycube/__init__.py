"""Textured grid raycaster: scene data, camera movement, ray casting and a pygame window."""

__version__ = "0.1.0"

__all__ = [
    "textutils",
    "linereader",
    "scene",
    "moves",
    "controls",
    "raycast",
    "display",
]