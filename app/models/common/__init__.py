"""Common models - base classes shared by every resource."""

from app.models.common.base import BaseEntity, ResourceRecord

__all__ = [
    "BaseEntity",
    "ResourceRecord",
]
