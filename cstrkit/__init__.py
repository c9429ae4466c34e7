"""Character, byte-buffer, C-string, conversion, text and descriptor-output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "memory", "cstring", "convert", "text", "output"]