"""
Credential definitions shared by credential providers.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Credentials:
    """An AWS access key pair, optionally with a session token."""

    access_key_id: str
    secret_access_key: str = field(repr=False)
    session_token: Optional[str] = field(default=None, repr=False)
    # Name of the provider that produced these credentials
    provider_name: Optional[str] = field(default=None, compare=False)


__all__ = [
    "Credentials",
]
