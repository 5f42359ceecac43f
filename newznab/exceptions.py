"""Exceptions raised by the newznab client.

Every failure surfaced by the client derives from `NewznabError`, split into
four families callers can branch on:

- `UsageError`: the caller asked for something the client refuses to send
  (an unregistered function, a missing endpoint or API key).
- `ProtocolError`: the server answered in a shape the client cannot decode.
  `TransportError` is the network-level subset (timeouts, refused
  connections, 404).
- `ServerError`: the server reported a structured Newznab error code.
"""

from typing import Optional, Union


class NewznabError(Exception):
    """Base class for all newznab client errors."""


class UsageError(NewznabError):
    """Raised when the client is used in a way it cannot honour."""


class FunctionNotSupported(UsageError):
    """Raised when a function is not in the client's allowlist."""

    def __init__(self, function: str, message: Optional[str] = None):
        super().__init__(message or f"Function not supported: {function}")
        self.function = function


class ProtocolError(NewznabError):
    """Raised when a response cannot be decoded into a payload."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class TransportError(ProtocolError):
    """Raised when the request never produced a usable HTTP response."""


class ServerError(NewznabError):
    """Raised when the server reports a Newznab error code.

    Attributes:
        code: The error code as reported by the server (an ``int`` when
            numeric).
        description: The resolved message, either the server's own
            description or the protocol's default text for the code.
    """

    def __init__(self, code: Union[int, str], description: str):
        super().__init__(f"{code}: {description}")
        self.code = code
        self.description = description


class CredentialsInvalid(ServerError):
    """Incorrect user credentials (100)."""


class AccountSuspended(ServerError):
    """Account suspended (101)."""


class NotAuthorized(ServerError):
    """Insufficient privileges (102)."""


class RegistrationDenied(ServerError):
    """Registration denied (103)."""


class RegistrationClosed(ServerError):
    """Registrations are closed (104)."""


class RegistrationConflict(ServerError):
    """Email address already taken (105)."""


class RegistrationMalformed(ServerError):
    """Email address badly formatted (106)."""


class RegistrationFailed(ServerError):
    """Registration failed with a data error (107)."""


class MissingParameter(ServerError):
    """A required parameter was not sent (200)."""


class InvalidParameter(ServerError):
    """A parameter had an incorrect value (201)."""


class FunctionNotDefined(ServerError):
    """The function is not defined by the protocol (202)."""


class FunctionNotAvailable(ServerError):
    """The optional function is not implemented by the server (203)."""


class ItemNotFound(ServerError):
    """No such item (300)."""


class ItemAlreadyExists(ServerError):
    """Item already exists (310)."""


class UnknownProtocolError(ServerError):
    """Unknown or unmapped server error (900)."""


class FunctionDisabled(ServerError, FunctionNotSupported):
    """The server knows the function but has it turned off (910)."""

    def __init__(self, code: Union[int, str], description: str):
        # Both bases define __init__ with different signatures.
        NewznabError.__init__(self, f"{code}: {description}")
        self.code = code
        self.description = description
        self.function = None
