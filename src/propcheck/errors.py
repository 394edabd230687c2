class Error(Exception):
    pass


class UserError(Error):
    """Raised when propcheck itself is used incorrectly, as opposed to the
    code under test misbehaving. These are never shrunk."""


class GeneratorExhaustedError(UserError):
    pass


class ArgumentError(UserError, ValueError):
    pass
