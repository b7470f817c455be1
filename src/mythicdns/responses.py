"""Interpretation of Mythic Beasts API response bodies."""

from mythicdns.exceptions import RemoteApiError, UnknownRemoteError

# Failed commands are echoed back prefixed with "N"
FAILURE_MARKER = "N"


def extract_error(body: str) -> RemoteApiError | None:
    """Extract an error from an API response body.

    Successful responses echo the applied command, so they start with the
    verb. Failures start with ``N`` followed by the command and a reason.
    The API is inconsistent about the separator before the reason: it is
    sometimes ``;`` and sometimes ``:``. ``;`` is tried first.

    Args:
        body: Raw response body.

    Returns:
        None on success, otherwise the error (without request context).
    """
    if not body.startswith(FAILURE_MARKER):
        return None

    parts = body.split(";")
    if len(parts) != 2:
        parts = body.split(":")
        if len(parts) != 2:
            return UnknownRemoteError()

    return RemoteApiError(parts[1].strip())
