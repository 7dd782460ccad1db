"""
Loaders that fill the paradigm store.
"""
