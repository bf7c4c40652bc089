"""
Custom exceptions for schema augmentation.

Skips (no Mutation root, configuration says no, field already present) are
never errors. These types cover malformed input that should abort a build.
"""

from typing import Optional


class AugmentationError(Exception):
    """Base exception for schema augmentation errors."""

    def __init__(self, message: str, type_name: Optional[str] = None):
        self.type_name = type_name
        super().__init__(message)


class InvalidRelationshipDescriptor(AugmentationError):
    """Raised when a relationship descriptor cannot produce generated names."""

    def __init__(
        self,
        message: str,
        type_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        self.field_name = field_name
        super().__init__(message, type_name)


class SchemaDocumentError(AugmentationError):
    """Raised when type definitions cannot be read into registries."""

    pass
