"""
SQLite paradigm store for conjugador.
"""
