"""
Sudachi Lookup - Dictionary Form Lookup Client

A small client for a Sudachi morphological analysis service that resolves
the dictionary form (辞書形) of the word under a text cursor.
"""

__version__ = "1.0.0"
__author__ = "Sudachi Lookup Contributors"
