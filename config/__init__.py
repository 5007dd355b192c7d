"""
Configuration package for the care schedule conflict engine.
"""
