"""
Utility modules for core_backend.
"""
