"""
Core domain primitives: exception hierarchy and operation results.
"""

from herodesk.core.exceptions import (
    HeroDeskException,
    RecordNotFoundError,
    StoreError,
    StoreResponseError,
    StoreTransportError,
)
from herodesk.core.result import OperationResult

__all__ = [
    "HeroDeskException",
    "OperationResult",
    "RecordNotFoundError",
    "StoreError",
    "StoreResponseError",
    "StoreTransportError",
]
