"""
CV Parser backend
"""
