"""
Configuration constants and parameters
"""
