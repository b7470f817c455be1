"""DNS-01 challenge record computation."""

import base64
import hashlib

from mythicdns.models import Dns01Record

CHALLENGE_LABEL = "_acme-challenge"


def compute_dns_txt_value(key_authorization: str) -> str:
    """Compute the DNS TXT record value for DNS-01 challenge.

    The TXT record value is the base64url-encoded SHA-256 digest
    of the key authorization string.

    Args:
        key_authorization: The key authorization string.

    Returns:
        The base64url-encoded SHA-256 digest (without padding).
    """
    digest = hashlib.sha256(key_authorization.encode()).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode()


def dns01_record(domain: str, key_authorization: str) -> Dns01Record:
    """Build the TXT record for a DNS-01 challenge on a domain.

    Args:
        domain: The domain name (without _acme-challenge prefix).
        key_authorization: The key authorization string.

    Returns:
        Record named _acme-challenge.{domain}. with the challenge value.
    """
    return Dns01Record(
        fqdn=f"{CHALLENGE_LABEL}.{domain.rstrip('.')}.",
        value=compute_dns_txt_value(key_authorization),
    )
