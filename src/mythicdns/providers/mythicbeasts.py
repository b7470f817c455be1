"""Mythic Beasts provider for ACME DNS-01 challenges."""

import httpx

from mythicdns._logging import Timer, domain_context, get_logger, log_extra
from mythicdns.challenges.dns01 import dns01_record
from mythicdns.commands import DELETE_TEMPLATE, REPLACE_TEMPLATE, build_command
from mythicdns.config import DEFAULT_BASE_URL, DEFAULT_HTTP_TIMEOUT, ProviderConfig
from mythicdns.credentials import parse_passwords
from mythicdns.exceptions import MissingCredentialError, TransportError, ZoneResolutionError
from mythicdns.models import ApiRequest
from mythicdns.providers.base import ChallengeProvider
from mythicdns.responses import extract_error
from mythicdns.zone import DnsZoneResolver, ZoneResolver, to_fqdn, un_fqdn

logger = get_logger(__name__)

# Documentation of the Primary DNS API:
# https://www.mythic-beasts.com/support/api/primary


class MythicBeastsProvider(ChallengeProvider):
    """DNS provider for Mythic Beasts primary DNS.

    Each zone hosted at Mythic Beasts has its own API password, so the
    provider is configured with a list of zone/password pairs and picks
    the password for the zone a challenge domain resolves to.

    Args:
        passwords: Space separated pairs, e.g. "example.com secret1 example.org secret2".
        base_url: API endpoint (default: "https://dnsapi.mythic-beasts.com/").
        timeout: HTTP request timeout in seconds (default: 30).
        zone_resolver: Resolver used to find authority zones
            (default: DnsZoneResolver using the system nameservers).

    Raises:
        FormatError: If the passwords string is empty or malformed.
    """

    def __init__(
        self,
        passwords: str,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_HTTP_TIMEOUT,
        zone_resolver: ZoneResolver | None = None,
    ):
        self._passwords = parse_passwords(passwords)
        self.base_url = base_url
        self.timeout = timeout
        self.zone_resolver = zone_resolver or DnsZoneResolver()

    @classmethod
    def from_config(cls, config: ProviderConfig) -> "MythicBeastsProvider":
        """Create a provider from loaded configuration."""
        return cls(
            passwords=config.passwords,
            base_url=config.base_url,
            timeout=config.http_timeout,
            zone_resolver=DnsZoneResolver(nameservers=[str(ns) for ns in config.nameservers]),
        )

    @classmethod
    def from_env(cls) -> "MythicBeastsProvider":
        """Create a provider from MYTHICBEASTS_* environment variables."""
        return cls.from_config(ProviderConfig.from_env())

    @property
    def zones(self) -> list[str]:
        """Zones that have an API password configured."""
        return sorted(self._passwords)

    def _find_zone(self, domain: str) -> str:
        """Find the authority zone for a domain, without trailing dot.

        Any resolver failure is reported against the domain as given.

        Raises:
            ZoneResolutionError: If the zone cannot be determined.
        """
        try:
            authority = self.zone_resolver.find_authority_zone(to_fqdn(domain))
        except ZoneResolutionError as exc:
            raise ZoneResolutionError(domain, exc.cause) from exc
        except Exception as exc:
            logger.error("Zone resolver failed", extra=log_extra(error=repr(exc)))
            raise ZoneResolutionError(domain, exc) from exc

        zone = un_fqdn(authority)
        logger.debug("Authority zone resolved", extra=log_extra(zone=zone))
        return zone

    def _password_for(self, zone: str, domain: str) -> str:
        """Look up the API password for a zone.

        Raises:
            MissingCredentialError: If no password is configured for the zone.
        """
        try:
            return self._passwords[zone]
        except KeyError:
            logger.error(
                "No API password for zone",
                extra=log_extra(zone=zone, configured_zones=self.zones),
            )
            raise MissingCredentialError(zone, domain) from None

    def _post(self, request: ApiRequest, domain: str) -> str:
        """Submit a command and return the response body.

        Raises:
            TransportError: On connection failure or timeout.
        """
        logger.debug(
            "Submitting command",
            extra=log_extra(zone=request.domain, command=request.command),
        )
        try:
            with Timer() as t:
                response = httpx.post(self.base_url, data=request.as_form(), timeout=self.timeout)
        except httpx.TransportError as exc:
            logger.error(
                "Mythic Beasts API request failed",
                extra=log_extra(zone=request.domain, error=str(exc)),
            )
            raise TransportError(domain, exc) from exc

        logger.debug(
            "Mythic Beasts API responded",
            extra=log_extra(
                zone=request.domain,
                status_code=response.status_code,
                elapsed_ms=t.elapsed_ms,
            ),
        )
        return response.text

    def _process_request(
        self, template: str, domain: str, token: str, key_authorization: str
    ) -> None:
        """Run a command template against the zone hosting the domain.

        Args:
            template: REPLACE_TEMPLATE or DELETE_TEMPLATE.
            domain: The domain name (without _acme-challenge prefix).
            token: The challenge token (unused).
            key_authorization: The key authorization string.

        Raises:
            ZoneResolutionError: If the authority zone cannot be determined.
            MissingCredentialError: If no password is configured for the zone.
            TransportError: If the API could not be reached.
            RemoteApiError: If the API rejected the command.
        """
        with domain_context(domain):
            record = dns01_record(domain, key_authorization)
            zone = self._find_zone(domain)
            password = self._password_for(zone, domain)

            request = ApiRequest(
                domain=zone,
                password=password,
                command=build_command(template, record.fqdn, record.value, ttl=record.ttl),
            )
            body = self._post(request, domain)

            error = extract_error(body)
            if error is not None:
                logger.error(
                    "Mythic Beasts API rejected command",
                    extra=log_extra(zone=zone, detail=error.message),
                )
                raise error.with_context(domain, zone)

    def present(self, domain: str, token: str, key_authorization: str) -> None:
        """Create or replace the challenge TXT record.

        Args:
            domain: The domain name (without _acme-challenge prefix).
            token: The challenge token (unused, kept for interface).
            key_authorization: The key authorization string.

        Raises:
            MythicDnsError: If the record could not be published.
        """
        self._process_request(REPLACE_TEMPLATE, domain, token, key_authorization)
        logger.info(
            "TXT record created",
            extra={"domain": domain, "record_name": f"_acme-challenge.{domain}"},
        )

    def cleanup(self, domain: str, token: str, key_authorization: str) -> None:
        """Delete the challenge TXT record.

        Args:
            domain: The domain name (without _acme-challenge prefix).
            token: The challenge token (unused, kept for interface).
            key_authorization: The key authorization string.

        Raises:
            MythicDnsError: If the record could not be removed.
        """
        self._process_request(DELETE_TEMPLATE, domain, token, key_authorization)
        logger.info(
            "TXT record deleted",
            extra={"domain": domain, "record_name": f"_acme-challenge.{domain}"},
        )
