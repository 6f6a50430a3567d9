"""
Credential provider reading static keys from a parsed profile.
"""

import logging
from dataclasses import replace
from typing import Any, Mapping, Optional

from sharedconfig.core.errors import CredentialsNotFoundError
from sharedconfig.verticals.credentials import Credentials
from sharedconfig.verticals.credentials.base import CredentialsProvider
from sharedconfig.verticals.credentials.static import StaticCredentialsProvider
from sharedconfig.verticals.profile.assembler import ProfileMap


logger = logging.getLogger(__name__)

ACCESS_KEY_ID = "aws_access_key_id"
SECRET_ACCESS_KEY = "aws_secret_access_key"
SESSION_TOKEN = "aws_session_token"


class ProfileCredentialsProvider(CredentialsProvider):
    """
    Resolves the static access keys stored in a named profile.

    The lookup happens on every call to resolve(), against the profile map
    the provider was built with. That map is never modified.
    """

    def __init__(self, profiles: ProfileMap, profile_name: str = "default"):
        self._profiles = profiles
        self.profile_name = profile_name

    def resolve(self, attributes: Optional[Mapping[str, Any]] = None) -> Credentials:
        """
        Raises:
            CredentialsNotFoundError: If the profile is missing or lacks keys.
        """
        profile = self._profiles.get(self.profile_name)
        if profile is None:
            raise CredentialsNotFoundError(
                f"Profile '{self.profile_name}' is not defined"
            )

        access_key_id = profile.get(ACCESS_KEY_ID)
        secret_access_key = profile.get(SECRET_ACCESS_KEY)
        if not access_key_id or not secret_access_key:
            raise CredentialsNotFoundError(
                f"Profile '{self.profile_name}' does not define both "
                f"{ACCESS_KEY_ID} and {SECRET_ACCESS_KEY}"
            )

        logger.debug("Resolved static credentials from profile %s", self.profile_name)
        provider = StaticCredentialsProvider(
            access_key_id, secret_access_key, profile.get(SESSION_TOKEN) or None
        )
        return replace(
            provider.resolve(attributes), provider_name=f"profile:{self.profile_name}"
        )
