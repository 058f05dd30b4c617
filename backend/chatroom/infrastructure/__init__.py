"""
INFRASTRUCTURE LAYER - Implementations of domain ports.

- persistence/ → SQLAlchemy repositories
"""
