"""
Custom exceptions for the Wikia API client
"""

from typing import Optional, Sequence


class WikiaAPIError(Exception):
    """Base exception for the Wikia API client"""
    pass


class ConfigurationError(WikiaAPIError):
    """Client configuration errors"""
    pass


class ValidationError(WikiaAPIError, ValueError):
    """Request parameter validation errors, raised before any I/O"""
    pass


class UnexpectedParameterError(ValidationError):
    """Parameter not declared for the endpoint"""
    def __init__(self, name: str):
        super().__init__(f"Unexpected parameter '{name}'")
        self.name = name


class MissingParameterError(ValidationError):
    """Required parameter was not supplied"""
    def __init__(self, name: str):
        super().__init__(f"Argument '{name}' is required")
        self.name = name


class BadArgumentTypeError(ValidationError):
    """Parameter value has the wrong type"""
    def __init__(self, name: str, expected: str, actual: str):
        super().__init__(
            f"Bad argument type. Expected {name} to be a {expected}, found {actual} instead"
        )
        self.name = name
        self.expected = expected
        self.actual = actual


class MissingGeneratorError(ValidationError):
    """None of the article/user identifying parameters was supplied"""
    def __init__(self, generators: Sequence[str]):
        names = " or ".join(f"'{g}'" for g in generators)
        super().__init__(f"Argument {names} should be passed")
        self.generators = tuple(generators)


class APIError(WikiaAPIError):
    """Remote API related errors"""
    def __init__(self, message: str, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.url = url
        self.status_code = status_code


class CommunityNotFoundError(APIError):
    """Wiki does not exist or answered with a non-JSON page"""
    def __init__(self, url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__("Community not found", url=url, status_code=status_code)
