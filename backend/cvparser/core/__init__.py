"""
Core configuration, logging and errors
"""
