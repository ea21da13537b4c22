"""
FileStore - validated local filesystem adapter.
"""
