"""Mythic Beasts DNS provider exceptions."""


class MythicDnsError(Exception):
    """Base exception for all mythicdns errors."""

    pass


class FormatError(MythicDnsError):
    """The credential list could not be parsed into zone/secret pairs."""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)


class ZoneResolutionError(MythicDnsError):
    """The authority zone for a domain could not be determined."""

    def __init__(self, domain: str, cause: BaseException | str):
        self.domain = domain
        self.cause = cause
        super().__init__(f"Could not determine zone for domain: '{domain}'. {cause}")


class MissingCredentialError(MythicDnsError):
    """No API password is configured for the resolved authority zone.

    This is a configuration error; retrying will not help.
    """

    def __init__(self, zone: str, domain: str | None = None):
        self.zone = zone
        self.domain = domain
        super().__init__(f"Missing password for the authentication zone: '{zone}'")


class TransportError(MythicDnsError):
    """The request never produced a response (connection failure, timeout)."""

    def __init__(self, domain: str, cause: BaseException):
        self.domain = domain
        self.cause = cause
        super().__init__(f"Request to Mythic Beasts API failed for domain: '{domain}'. {cause}")


class RemoteApiError(MythicDnsError):
    """The API answered with a negative acknowledgement.

    Args:
        message: Reason extracted from the response body.
        domain: Domain the request was made for, if known.
        zone: Authority zone the request was made against, if known.
    """

    def __init__(self, message: str, domain: str | None = None, zone: str | None = None):
        self.message = message
        self.domain = domain
        self.zone = zone
        if domain is None:
            super().__init__(message)
        else:
            super().__init__(f"Unable to update TXT record for domain: '{domain}'. {message}")

    def with_context(self, domain: str, zone: str) -> "RemoteApiError":
        """Return a copy of this error carrying the request's domain and zone.

        Args:
            domain: Domain the request was made for.
            zone: Authority zone used for the request.

        Returns:
            A new error of the same class.
        """
        return type(self)(self.message, domain=domain, zone=zone)


class UnknownRemoteError(RemoteApiError):
    """Negative acknowledgement whose reason could not be extracted."""

    def __init__(
        self,
        message: str = "Unknown error",
        domain: str | None = None,
        zone: str | None = None,
    ):
        super().__init__(message, domain=domain, zone=zone)
