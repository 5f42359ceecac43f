"""Translation of Newznab error codes into exceptions."""

from __future__ import annotations

import logging
from typing import Dict, Optional, Tuple, Type, Union

from newznab.exceptions import (
    AccountSuspended,
    CredentialsInvalid,
    FunctionDisabled,
    FunctionNotAvailable,
    FunctionNotDefined,
    InvalidParameter,
    ItemAlreadyExists,
    ItemNotFound,
    MissingParameter,
    NotAuthorized,
    RegistrationClosed,
    RegistrationConflict,
    RegistrationDenied,
    RegistrationFailed,
    RegistrationMalformed,
    ServerError,
    UnknownProtocolError,
)

log = logging.getLogger(__name__)

API_DISABLED = "API Disabled"

ERROR_CODES: Dict[int, Tuple[str, Type[ServerError]]] = {
    100: ("Incorrect user credentials", CredentialsInvalid),
    101: ("Account suspended", AccountSuspended),
    102: ("Insufficient privileges/not authorized", NotAuthorized),
    103: ("Registration denied", RegistrationDenied),
    104: ("Registrations are closed", RegistrationClosed),
    105: ("Invalid registration (Email Address Taken)", RegistrationConflict),
    106: ("Invalid registration (Email Address Bad Format)", RegistrationMalformed),
    107: ("Registration Failed (Data error)", RegistrationFailed),
    200: ("Missing parameter", MissingParameter),
    201: ("Incorrect parameter", InvalidParameter),
    202: (
        "No such function. (Function not defined in this specification).",
        FunctionNotDefined,
    ),
    203: (
        "Function not available. (Optional function is not implemented).",
        FunctionNotAvailable,
    ),
    300: ("No such item.", ItemNotFound),
    310: ("Item already exists.", ItemAlreadyExists),
    900: ("Unknown error", UnknownProtocolError),
    910: (API_DISABLED, FunctionDisabled),
}


def _parse_code(code: Union[int, str, None]) -> Union[int, str]:
    if code is None:
        return ""
    try:
        return int(code)
    except (TypeError, ValueError):
        return str(code)


def translate_error(
    code: Union[int, str, None], description: Optional[str] = None
) -> ServerError:
    """Map a Newznab error code to its exception.

    The server's description is used verbatim when present; otherwise the
    protocol's default text for the code is used.

    Parameters:
        code: Error code as found in the response, numeric or string.
        description: Optional server supplied description.

    Returns:
        The exception instance, ready to be raised by the caller.
    """
    parsed = _parse_code(code)
    default_message, error_class = ERROR_CODES.get(
        parsed,  # type: ignore[arg-type]
        ("Unknown error", UnknownProtocolError),
    )
    message = description if description else default_message

    if message == API_DISABLED:
        error_class = FunctionDisabled

    log.warning("Newznab server error %s: %s", parsed, message)
    return error_class(parsed, message)
