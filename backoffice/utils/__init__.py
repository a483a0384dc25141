"""
Utilities package
"""
