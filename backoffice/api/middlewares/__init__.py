"""
Request middlewares
"""
