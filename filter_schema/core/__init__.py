"""
Core services for filter schema generation.
"""
