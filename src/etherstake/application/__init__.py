"""
Application layer: use cases orchestrating domain objects.
"""
