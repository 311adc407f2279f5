"""Procedural noise utilities: permutation tables, point transformers, noise maps, colour gradients and rendering."""

__version__ = "0.1.0"