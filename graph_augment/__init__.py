"""
Relationship mutation augmentation for graph-backed GraphQL schemas.
"""

__version__ = "0.1.0"
