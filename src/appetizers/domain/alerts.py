"""User-facing alert values."""

from dataclasses import dataclass

from appetizers.domain.errors import ErrorKind


@dataclass(frozen=True)
class AlertItem:
    """Title/message pair presented in an acknowledgeable dialog."""

    title: str
    message: str
    dismiss_label: str = "OK"


_SERVER_ERROR = "Server Error"

_ALERTS: dict[ErrorKind, AlertItem] = {
    ErrorKind.INVALID_URL: AlertItem(
        _SERVER_ERROR,
        "There was an issue connecting to the server. "
        "If this persists, please contact support.",
    ),
    ErrorKind.INVALID_RESPONSE: AlertItem(
        _SERVER_ERROR,
        "Invalid response from the server. "
        "Please try again later or contact support.",
    ),
    ErrorKind.INVALID_DATA: AlertItem(
        _SERVER_ERROR,
        "The data received from the server was invalid. Please contact support.",
    ),
    ErrorKind.UNREACHABLE: AlertItem(
        _SERVER_ERROR,
        "Unable to complete your request at this time. "
        "Please check your internet connection.",
    ),
    ErrorKind.CORRUPT_DATA: AlertItem(
        "Profile Error",
        "There was an error saving or retrieving your profile.",
    ),
    ErrorKind.INVALID_FORM: AlertItem(
        "Invalid Form",
        "Please ensure all fields in the form have been filled out.",
    ),
    ErrorKind.INVALID_EMAIL: AlertItem(
        "Invalid Email",
        "Please ensure your email is correct.",
    ),
    ErrorKind.ENCODE_FAILURE: AlertItem(
        "Profile Error",
        "There was an error saving or retrieving your profile.",
    ),
}

PROFILE_SAVED = AlertItem(
    "Profile Saved",
    "Your profile information was successfully saved.",
)


def alert_for(kind: ErrorKind) -> AlertItem:
    """Return the alert shown for an error kind."""
    return _ALERTS[kind]
