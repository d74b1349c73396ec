class CustomBaseError(Exception):
    """Base class for all custom exceptions - controls logging behavior in @Logger.io"""

    def __init__(self, message: str, status_code: int) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class ValidationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class AuthenticationError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 401)


class PaymentRequiredError(CustomBaseError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 402)


class NotFoundError(CustomBaseError):
    def __init__(self, message: str = 'No result for this search!') -> None:
        super().__init__(message, 404)


class InternalServerError(CustomBaseError):
    def __init__(self, message: str = 'Internal Server Error') -> None:
        super().__init__(message, 500)
