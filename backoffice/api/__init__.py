"""
BFF HTTP layer
"""
