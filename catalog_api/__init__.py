"""Catalog API: product catalog backend with filtered search."""
