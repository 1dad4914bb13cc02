"""Graph and data primitives for Bayesian network structures: arc sets,
adjacency matrices, CPDAGs, bootstrap strengths and scoring helpers."""

__version__ = "0.1.0"