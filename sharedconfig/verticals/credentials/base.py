"""
Abstract base class for credential providers.
"""

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from sharedconfig.verticals.credentials import Credentials


class CredentialsProvider(ABC):
    """
    Abstract base class for credential providers.

    A provider resolves a set of credentials on demand. Providers that hold
    resources release them in close(); they can also be used as context
    managers.
    """

    @abstractmethod
    def resolve(self, attributes: Optional[Mapping[str, Any]] = None) -> Credentials:
        """
        Return credentials.

        Args:
            attributes: Optional context for the lookup. Providers that do not
                need any context ignore it.
        """
        pass

    def close(self) -> None:
        """Release any resources held by the provider."""
        pass

    def __enter__(self) -> "CredentialsProvider":
        return self

    def __exit__(self, *args: Any) -> None:
        self.close()
