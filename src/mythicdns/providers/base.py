"""Abstract base class for DNS-01 challenge providers."""

from abc import ABC, abstractmethod


class ChallengeProvider(ABC):
    """Abstract interface for DNS-01 challenge providers.

    Challenge providers publish and remove the TXT record at
    _acme-challenge.{domain} that an ACME server checks during
    DNS-01 validation.
    """

    @abstractmethod
    def present(self, domain: str, token: str, key_authorization: str) -> None:
        """Publish the TXT record for an ACME challenge.

        Args:
            domain: The domain name (without _acme-challenge prefix).
            token: The challenge token.
            key_authorization: The key authorization the record value derives from.

        Raises:
            MythicDnsError: If the record could not be published.
        """
        ...

    @abstractmethod
    def cleanup(self, domain: str, token: str, key_authorization: str) -> None:
        """Remove the TXT record created by present().

        Args:
            domain: The domain name (without _acme-challenge prefix).
            token: The challenge token.
            key_authorization: The key authorization the record value derives from.

        Raises:
            MythicDnsError: If the record could not be removed.
        """
        ...
