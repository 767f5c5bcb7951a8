from .matrix import SINGULAR_THRESHOLD, identity, invert, multiply, transpose

__all__ = ["SINGULAR_THRESHOLD", "identity", "invert", "multiply", "transpose"]
