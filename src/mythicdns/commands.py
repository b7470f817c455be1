"""Command strings for the Mythic Beasts primary DNS API."""

from mythicdns.models import RECORD_TTL, CommandVerb

REPLACE_TEMPLATE = f"{CommandVerb.REPLACE} {{fqdn}} {{ttl}} TXT {{value}}"
DELETE_TEMPLATE = f"{CommandVerb.DELETE} {{fqdn}} {{ttl}} TXT {{value}}"


def build_command(template: str, fqdn: str, value: str, ttl: int = RECORD_TTL) -> str:
    """Render a command template for a TXT record.

    No escaping is done here; the command is form-encoded on submission.

    Args:
        template: REPLACE_TEMPLATE or DELETE_TEMPLATE.
        fqdn: Record name, e.g. "_acme-challenge.example.com.".
        value: TXT record value.
        ttl: Record TTL in seconds.

    Returns:
        The command, e.g. "REPLACE _acme-challenge.example.com. 3600 TXT abc".
    """
    return template.format(fqdn=fqdn, ttl=ttl, value=value)
