"""Field-by-field access, comparison, hashing and text IO for dataclasses, named tuples and sequences."""

__version__ = "0.1.0"
__all__ = ["core", "fields", "functors", "io", "names", "ops"]