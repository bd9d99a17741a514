"""Building blocks for comparing similar files: line diff, error arithmetic, bit vectors."""

__version__ = "0.1.0"
__all__ = ["analyze", "arith", "bitvector", "buffers", "discard", "flags"]