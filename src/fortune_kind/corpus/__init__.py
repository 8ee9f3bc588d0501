"""Corpus scanning, weighted selection, length filtering and search."""
