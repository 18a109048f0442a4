"""Small number experiments: arithmetic derivatives, prime finite differences, byte packing, glibc rand() runs and an in-memory record store."""

__version__ = "0.1.0"