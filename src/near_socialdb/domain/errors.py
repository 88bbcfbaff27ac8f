from __future__ import annotations

"""
Client Error Hierarchy.

Every failure raised by the library derives from SocialDbError so callers
can catch the whole family at once. Exceptions raised by a user-supplied
signer are not wrapped and reach the caller unchanged.
"""


class SocialDbError(Exception):
    """Base class for all SocialDB client failures."""


class ValidationError(SocialDbError):
    """The write request does not target exactly one account."""


class AuthenticationError(SocialDbError):
    """The signer could not resolve a caller identity."""


class AuthorizationError(SocialDbError):
    """The caller identity does not own the account being written."""


class TransportError(SocialDbError):
    """The bundled JSON-RPC transport failed to complete a request."""
