"""
Startup validators
"""
