"""Errors absorbed by the identification workflow.

None of these reach the end user. The client and workflow hand them back as
values so callers can log, retry or alert on them.
"""


class IdentificationError(Exception):
    """Base class for every identification failure."""


class ImageEncodingError(IdentificationError):
    """The uploaded image could not be decoded or re-encoded as JPEG."""


class CredentialFetchError(IdentificationError):
    INVALID_ENDPOINT = "invalid_endpoint"
    TRANSPORT_FAILURE = "transport_failure"
    MALFORMED_RESPONSE = "malformed_response"

    def __init__(self, reason, message=""):
        self.reason = reason
        super().__init__(f"{reason}: {message}" if message else reason)


FetchError = CredentialFetchError


class TransportError(IdentificationError):
    """Network failure (including timeout) calling the classification endpoint."""


class UnexpectedStatusError(IdentificationError):
    def __init__(self, status_code, body=""):
        self.status_code = status_code
        self.body = body
        super().__init__(f"unexpected HTTP status {status_code}")


class DecodeError(IdentificationError):
    """Response body did not match the chat-completion envelope."""


class UnknownLabelError(IdentificationError):
    # soft error: handled by random substitution
    def __init__(self, label):
        self.label = label
        super().__init__(f"label not in catalog: {label!r}")
