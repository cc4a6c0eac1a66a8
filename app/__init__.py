"""
Application Package - Configuration and Errors
"""
