"""
Summary cache storage.
"""
