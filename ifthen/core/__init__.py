"""
Core packages. No side effects on import.
"""
