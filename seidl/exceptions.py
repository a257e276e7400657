"""Custom exceptions for seidl"""


class SeidlError(Exception):
    """Base exception for all seidl errors"""
    pass


class UsageError(SeidlError):
    """Raised when the command line cannot be interpreted"""
    pass


class DanglingArgumentError(UsageError):
    """Raised when a configuration flag is not followed by a CSP"""

    def __init__(self, flag: str):
        self.flag = flag
        super().__init__(f"dangling argument: {flag}")


class UnknownArgumentError(UsageError):
    """Raised for unrecognized flags and CSP names"""
    pass


class CloudInfoError(SeidlError):
    """Base exception for public cloud info service errors"""
    pass


class CloudInfoConnectionError(CloudInfoError):
    """Raised when the service cannot be reached or returns an error status"""
    pass


class CloudInfoDecodeError(CloudInfoError):
    """Raised when a response body is not the expected JSON payload"""
    pass


class NoImagesFoundError(SeidlError):
    """Raised when filtering leaves no images to display"""

    def __init__(self, restrictive: bool = False):
        self.restrictive = restrictive
        if restrictive:
            message = "no images found (too restrictive filter?)"
        else:
            message = "no images found"
        super().__init__(message)


class ConfigurationError(SeidlError):
    """Raised when configuration is invalid"""
    pass
