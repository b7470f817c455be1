"""Pydantic models for DNS-01 records and API requests."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

# TTL of challenge records, in seconds
RECORD_TTL = 3600


class CommandVerb(StrEnum):
    """Record operations used for DNS-01 challenges."""

    REPLACE = "REPLACE"
    DELETE = "DELETE"


class Dns01Record(BaseModel):
    """TXT record that answers a DNS-01 challenge."""

    fqdn: str
    value: str
    ttl: int = RECORD_TTL

    model_config = ConfigDict(frozen=True)


class ApiRequest(BaseModel):
    """Form fields posted to the API."""

    domain: str
    password: str = Field(repr=False)
    command: str

    model_config = ConfigDict(frozen=True)

    def as_form(self) -> dict[str, str]:
        """Return the fields as form data."""
        return {"domain": self.domain, "password": self.password, "command": self.command}
