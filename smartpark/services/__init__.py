"""
Domain services. Each module wraps the store operations of one entity
with validation and raises ``smartpark.errors`` on failure.
"""
