"""
Static lookup data — built once at import time, never mutated.
"""
