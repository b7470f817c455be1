"""Authority zone discovery for challenge domains."""

from abc import ABC, abstractmethod

import dns.exception
import dns.resolver

from mythicdns._logging import get_logger
from mythicdns.exceptions import ZoneResolutionError

logger = get_logger(__name__)


def to_fqdn(name: str) -> str:
    """Return the name terminated with a dot."""
    return name if name.endswith(".") else f"{name}."


def un_fqdn(name: str) -> str:
    """Return the name without its trailing dot."""
    return name.removesuffix(".")


class ZoneResolver(ABC):
    """Interface for finding the zone a domain is hosted in."""

    @abstractmethod
    def find_authority_zone(self, fqdn: str) -> str:
        """Find the authority zone for a fully qualified name.

        Args:
            fqdn: Domain name with trailing dot.

        Returns:
            The zone name with trailing dot, e.g. "example.com.".

        Raises:
            ZoneResolutionError: If the zone cannot be determined.
        """
        ...


class DnsZoneResolver(ZoneResolver):
    """Zone resolver that queries recursive nameservers for SOA records.

    Args:
        nameservers: Recursive nameserver addresses. Uses the system
            resolver configuration when empty.
        lifetime: Total seconds allowed for each zone lookup.
    """

    def __init__(self, nameservers: list[str] | None = None, lifetime: float = 10.0):
        self.nameservers = list(nameservers or [])
        self.lifetime = lifetime

    def _resolver(self) -> dns.resolver.Resolver:
        resolver = dns.resolver.Resolver(configure=not self.nameservers)
        if self.nameservers:
            resolver.nameservers = self.nameservers
        resolver.lifetime = self.lifetime
        return resolver

    def find_authority_zone(self, fqdn: str) -> str:
        """Walk up the name until a SOA record marks the zone cut.

        Args:
            fqdn: Domain name with trailing dot.

        Returns:
            The zone name with trailing dot.

        Raises:
            ZoneResolutionError: On any DNS failure, including no SOA found,
                or when a configured nameserver address is invalid.
        """
        try:
            zone = dns.resolver.zone_for_name(fqdn, resolver=self._resolver())
        except (dns.exception.DNSException, ValueError) as exc:
            logger.debug(
                "Zone lookup failed",
                extra={"fqdn": fqdn, "error": str(exc)},
            )
            raise ZoneResolutionError(un_fqdn(fqdn), exc) from exc

        zone_name = zone.to_text()
        logger.debug("Zone found", extra={"fqdn": fqdn, "zone": zone_name})
        return zone_name
