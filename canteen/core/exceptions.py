"""
Domain errors raised by the canteen services.

Not-found and storage failures are reported as None/False; only caller
mistakes (validation) and authentication problems are raised.
"""


class CanteenError(Exception):
    """Base class for errors reported back to the caller"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationFailed(CanteenError):
    pass


class InvalidTransition(ValidationFailed):
    def __init__(self, current, requested):
        self.current = current
        self.requested = requested
        super().__init__(f"Cannot change order from {current} to {requested}")


class EmailAlreadyRegistered(ValidationFailed):
    def __init__(self):
        super().__init__("Email already registered")


class InvalidCredentials(CanteenError):
    def __init__(self):
        super().__init__("Invalid email or password")


class AccountDeactivated(CanteenError):
    def __init__(self):
        super().__init__("Your account has been deactivated")
