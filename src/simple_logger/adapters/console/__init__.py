"""Console rendering backends."""
