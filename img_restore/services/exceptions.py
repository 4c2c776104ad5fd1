"""
Service Layer Exceptions

Custom exceptions for the restoration workflow and its remote calls.
"""


class RestorationError(Exception):
    """
    Base class for failures of a single restoration attempt.
    'kind' is the stable, machine-readable name stored in the FAILED state.
    """
    kind = "RestorationError"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class PayloadTooLarge(RestorationError):
    """Raised when an uploaded image exceeds the size limit."""
    kind = "PayloadTooLarge"

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(
            f"Image is too large ({size} bytes). Please choose an image under {limit // (1024 * 1024)}MB."
        )


class RemoteError(RestorationError):
    """Raised when the call to the image generation service fails."""
    kind = "RemoteError"


class NoImageReturned(RestorationError):
    """Raised when the service answered without any inline image data."""
    kind = "NoImageReturned"

    def __init__(self, message: str = "The restoration service did not return an image."):
        super().__init__(message)


class InvalidTransitionError(Exception):
    """Raised when an operation is not allowed in the current workflow state."""
    pass
