"""
Credential provider for a fixed set of credentials.
"""

from typing import Any, Mapping, Optional

from sharedconfig.verticals.credentials import Credentials
from sharedconfig.verticals.credentials.base import CredentialsProvider


class StaticCredentialsProvider(CredentialsProvider):
    """Always returns the credentials it was created with."""

    PROVIDER_NAME = "static"

    def __init__(
        self,
        access_key_id: Optional[str],
        secret_access_key: Optional[str],
        session_token: Optional[str] = None,
    ):
        """
        Args:
            access_key_id: AWS access key ID. Required.
            secret_access_key: AWS secret access key. Required.
            session_token: Session token for temporary credentials.

        Raises:
            ValueError: If the access key ID or the secret access key is
                missing or empty.
        """
        if not access_key_id or not secret_access_key:
            raise ValueError(
                "StaticCredentialsProvider - access_key_id and secret_access_key "
                "must not be empty"
            )
        self._credentials = Credentials(
            access_key_id=access_key_id,
            secret_access_key=secret_access_key,
            session_token=session_token,
            provider_name=self.PROVIDER_NAME,
        )

    @classmethod
    def from_credentials(cls, credentials: Credentials) -> "StaticCredentialsProvider":
        return cls(
            credentials.access_key_id,
            credentials.secret_access_key,
            credentials.session_token,
        )

    def resolve(self, attributes: Optional[Mapping[str, Any]] = None) -> Credentials:
        return self._credentials
