"""
Demo data generators.
"""
