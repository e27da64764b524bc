"""
enumgen: build and emit a single generated enum type.

An EnumModel collects members (sanitized names, optional explicit values,
optional annotations) under a fixed conflict policy. Backends render a
finished model to source text.

ARCHITECTURAL GUARANTEE:
------------------------
The model contains ZERO knowledge of target-language syntax.
All text emission happens in enumgen.backends.
"""

from .model import (
    Annotation,
    ConflictError,
    ConflictResolutionError,
    EnumModel,
    EnumModelError,
    InvalidIdentifierError,
    MemberEntry,
    TypeReference,
)

__version__ = "0.1.0"

__all__ = [
    "Annotation",
    "ConflictError",
    "ConflictResolutionError",
    "EnumModel",
    "EnumModelError",
    "InvalidIdentifierError",
    "MemberEntry",
    "TypeReference",
]
