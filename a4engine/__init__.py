"""Core pieces of a small 2D game engine: vectors, matrices, input mapping, spritesheets and model files."""

__version__ = "0.1.0"
__all__ = ["vectors", "matrices", "input", "spritesheet", "model"]