class IotException(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class IotAuthenticationException(IotException):
    pass


class IotAuthorizationException(IotException):
    pass


class SigningError(IotException):
    pass


class EmptyTokenError(IotException):
    pass
