"""
Utilities - configuration.
"""
