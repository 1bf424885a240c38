"""Definitions of all custom exception classes."""

from requests import HTTPError


class JotformException(HTTPError):
    """JotForm API responded with a non-2xx status"""


class JotformInvalidParameterException(JotformException):
    """Invalid parameter passed to request (HTTP 400)"""


class JotformInvalidAuthenticationException(JotformException):
    """Missing or invalid API key (HTTP 401)"""


class JotformForbiddenException(JotformException):
    """HTTP 403 Error"""


class JotformNotFoundException(JotformException):
    """Path or resource not found (HTTP 404)"""


class JotformRateLimitException(JotformException):
    """Reached JotForm API daily limit (HTTP 429)"""


class JotformInternalException(JotformException):
    """Unexpected error on JotForm servers (HTTP 5xx)"""


class JotformInvalidResponseException(ValueError):
    """Response body is not valid JSON"""


class JotformUnsupportedOperationException(NotImplementedError):
    """Endpoint is not supported by this client"""


def exception_for_status(status_code: int) -> type:
    """Returns the exception class matching an HTTP status code"""
    if status_code == 400:
        return JotformInvalidParameterException
    if status_code == 401:
        return JotformInvalidAuthenticationException
    if status_code == 403:
        return JotformForbiddenException
    if status_code == 404:
        return JotformNotFoundException
    if status_code == 429:
        return JotformRateLimitException
    if status_code >= 500:
        return JotformInternalException
    return JotformException
