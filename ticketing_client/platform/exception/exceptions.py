class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class DomainError(CustomBaseError):
    """Operation called in a state that does not allow it"""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(message, status_code)


class ValidationError(CustomBaseError):
    """Local precheck failure - never sent to the remote, never retried"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class TransportError(CustomBaseError):
    """No response reached the client (connect error, timeout, broken connection)"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)


class RemoteError(CustomBaseError):
    """The remote answered with a non-success status (or an unusable body)"""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message, status_code)


class CredentialStoreError(CustomBaseError):
    """The durable credential store could not be written or cleared"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
