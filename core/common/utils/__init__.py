"""
Utility functions for Agora application.
"""
