"""Helpers for a small embedded board: vector, matrix and quaternion math, JSON building, a one-bit framebuffer, keyboard mapping, an interrupt queue, files and clock."""

__version__ = "0.1.0"