"""Building blocks for vector search: configs, datasets, bitsets, distances and index records."""

__version__ = "0.1.0"