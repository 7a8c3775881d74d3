"""
iHost API - event planning backend and its Python client
"""
__version__ = "1.0.0"
