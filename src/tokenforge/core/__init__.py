"""
tokenforge core: color math, scale generation, contrast and aggregation.
"""
