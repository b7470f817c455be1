"""Provider configuration loaded from environment variables."""

import os
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress

from mythicdns.exceptions import FormatError

DEFAULT_BASE_URL = "https://dnsapi.mythic-beasts.com/"
DEFAULT_HTTP_TIMEOUT = 30.0

ENV_PASSWORDS = "MYTHICBEASTS_API_PASSWORDS"
ENV_BASE_URL = "MYTHICBEASTS_API_URL"
ENV_HTTP_TIMEOUT = "MYTHICBEASTS_HTTP_TIMEOUT"
ENV_NAMESERVERS = "MYTHICBEASTS_NAMESERVERS"


class ProviderConfig(BaseModel):
    """Settings for a Mythic Beasts DNS provider."""

    passwords: str = Field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    http_timeout: float = Field(default=DEFAULT_HTTP_TIMEOUT, gt=0)
    nameservers: list[IPvAnyAddress] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "ProviderConfig":
        """Load configuration from environment variables.

        Args:
            environ: Mapping to read instead of os.environ.

        Returns:
            The loaded configuration.

        Raises:
            FormatError: If MYTHICBEASTS_API_PASSWORDS is missing or blank.
            pydantic.ValidationError: If another variable has an invalid value,
                e.g. a nameserver that is not an IP address.
        """
        env = os.environ if environ is None else environ

        passwords = env.get(ENV_PASSWORDS, "")
        if not passwords.strip():
            raise FormatError(f"Mythic Beasts credentials missing: set {ENV_PASSWORDS}")

        values: dict[str, object] = {"passwords": passwords}
        if env.get(ENV_BASE_URL):
            values["base_url"] = env[ENV_BASE_URL]
        if env.get(ENV_HTTP_TIMEOUT):
            values["http_timeout"] = env[ENV_HTTP_TIMEOUT]
        if env.get(ENV_NAMESERVERS):
            values["nameservers"] = env[ENV_NAMESERVERS].replace(",", " ").split()

        return cls.model_validate(values)
