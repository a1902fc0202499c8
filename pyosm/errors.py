from loguru import logger


class OsmError(Exception):
    """Base class for everything pyosm raises."""


class InvalidArgument(OsmError, ValueError):
    pass


class CredentialsMissing(OsmError):
    def __init__(self, message='this call needs credentials but the session has none'):
        super(CredentialsMissing, self).__init__(message)


class ChangesetMissing(OsmError):
    def __init__(self, message='no open changeset is current for this session'):
        super(ChangesetMissing, self).__init__(message)


class ApiError(OsmError):
    """An error response from the API. Keeps the raw body for diagnostics."""

    def __init__(self, body=None, status=None):
        super(ApiError, self).__init__(body)
        self.body = body
        self.status = status

    def __str__(self):
        return '%s (HTTP %s): %s' % (type(self).__name__, self.status, self.body)


class BadRequest(ApiError):
    pass


class Unauthorized(ApiError):
    pass


class NotFound(ApiError):
    pass


class MethodNotAllowed(ApiError):
    pass


class Conflict(ApiError):
    pass


class Gone(ApiError):
    pass


class PreconditionFailed(ApiError):
    pass


class ServerError(ApiError):
    pass


class GenericError(ApiError):
    pass


ERRORS_BY_STATUS = {
    400: BadRequest,
    401: Unauthorized,
    404: NotFound,
    405: MethodNotAllowed,
    409: Conflict,
    410: Gone,
    412: PreconditionFailed,
    500: ServerError,
}


def classify(status_code, body=None):
    """Map an HTTP status code to the error it stands for.

    Returns None for 200 and an (unraised) ApiError instance for everything
    else. Never raises itself.
    """
    if type(status_code) is not int:
        return GenericError(body, status_code)
    if status_code == 200:
        return None
    return ERRORS_BY_STATUS.get(status_code, GenericError)(body, status_code)


def check_response_codes(response):
    error = classify(response.status_code, response.text)
    if error is None:
        return
    logger.error("Request to {} failed with HTTP {}", response.url, response.status_code)
    raise error
