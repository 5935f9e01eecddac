"""
Exercises package

A console catalogue of small numbered exercises. Each exercise is a leaf
routine picked by a selector typed at the prompt. The package separates the
dispatcher (core), the illustrative classes (domain), the hardcoded inputs
(data), the pure helpers the routines call (rules) and the printing routines
themselves (ui).
"""

__all__ = ["core", "domain", "data", "rules", "ui"]
