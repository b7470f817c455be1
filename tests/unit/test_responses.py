"""Unit tests for API response interpretation."""

from mythicdns.exceptions import RemoteApiError, UnknownRemoteError
from mythicdns.responses import extract_error


class TestExtractError:
    """Tests for extract_error()."""

    def test_success_response(self):
        """A response echoing the command is not an error."""
        assert extract_error("ADD www 86400 A 93.93.130.49") is None

    def test_success_replace_echo(self):
        """REPLACE echoes are successes."""
        body = "REPLACE _acme-challenge.example.com. 3600 TXT abc"

        assert extract_error(body) is None

    def test_empty_body_is_success(self):
        """Only a leading N marks a failure."""
        assert extract_error("") is None

    def test_semicolon_delimited_error(self):
        """Reason after ';' is extracted and stripped."""
        body = "NADD www 86400 A 93.93.130.49; Can't have multiple identical records"

        error = extract_error(body)

        assert isinstance(error, RemoteApiError)
        assert not isinstance(error, UnknownRemoteError)
        assert error.message == "Can't have multiple identical records"
        assert str(error) == "Can't have multiple identical records"

    def test_colon_delimited_error(self):
        """Reason after ':' is extracted when there is no ';'."""
        body = "NDELETE www 86400 A 93.93.130.49: No such record"

        error = extract_error(body)

        assert isinstance(error, RemoteApiError)
        assert error.message == "No such record"

    def test_semicolon_preferred_over_colon(self):
        """';' is tried first, so a ':' in the reason is kept."""
        body = "NREPLACE www 3600 TXT abc; Invalid value: too long"

        error = extract_error(body)

        assert error is not None
        assert error.message == "Invalid value: too long"

    def test_falls_back_to_colon_when_many_semicolons(self):
        """More than one ';' makes the first split fail, then ':' is used."""
        body = "NREPLACE www 3600 TXT a;b: Bad record; really"

        error = extract_error(body)

        assert error is not None
        assert error.message == "Bad record; really"

    def test_no_delimiter_is_unknown_error(self):
        """A negative response without a delimiter is still a failure."""
        error = extract_error("Nsomethingwithnodelimiter")

        assert isinstance(error, UnknownRemoteError)
        assert error.message == "Unknown error"

    def test_too_many_delimiters_is_unknown_error(self):
        """Neither delimiter giving exactly two parts is an unknown error."""
        error = extract_error("NA: b: c; d; e")

        assert isinstance(error, UnknownRemoteError)

    def test_lowercase_n_is_success(self):
        """The failure marker is case-sensitive."""
        assert extract_error("nope; not an error") is None

    def test_error_has_no_request_context(self):
        """Parsed errors carry only the message."""
        error = extract_error("NADD www; failed")

        assert error is not None
        assert error.domain is None
        assert error.zone is None
