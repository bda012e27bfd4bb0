"""HNSW approximate nearest-neighbour search, vector file readers, recall measurement, a benchmark command and a compressed radix tree."""

__version__ = "0.1.0"

__all__ = ["cli", "ground_truth", "hnsw", "radix", "util", "vecs_io"]