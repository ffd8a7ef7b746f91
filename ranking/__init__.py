"""
Ranking package for the golf scoring system.
"""
