# mockapi/errors.py


class FixtureApiError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(FixtureApiError):
    """Required input missing or malformed."""
    status_code = 400


class AuthenticationError(FixtureApiError):
    """No credential presented, or login rejected."""
    status_code = 401


class NotFoundError(FixtureApiError):
    status_code = 404
