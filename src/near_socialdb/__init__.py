from __future__ import annotations

"""
near_socialdb: client for the SocialDB contract on NEAR.

Writes are reduced to the values that actually changed and carry the
storage deposit they require.
"""

__version__ = "0.1.0"

from near_socialdb.client import SocialDb
from near_socialdb.domain.errors import (
    AuthenticationError,
    AuthorizationError,
    SocialDbError,
    TransportError,
    ValidationError,
)
from near_socialdb.domain.storage_models import StorageView, WritePlan
from near_socialdb.signer import Signer

__all__ = [
    "SocialDb",
    "Signer",
    "StorageView",
    "WritePlan",
    "SocialDbError",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "TransportError",
    "__version__",
]
