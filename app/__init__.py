"""
Journal Keeper backend application.
"""
__version__ = "0.3.0"
