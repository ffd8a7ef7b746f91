"""
Reports package for the golf scoring system.
"""
