"""
Custom exceptions for the yomitoki package.

This module defines exception classes used throughout the yomitoki library
to provide clear error messages for various failure conditions.
"""


class YomitokiError(Exception):
    """
    Base exception class for all yomitoki-related errors.

    This exception serves as the parent class for more specific exceptions
    and can be used to catch any error raised by the yomitoki library.

    Example:
        >>> try:
        ...     yomitoki.parse(text)
        ... except YomitokiError as e:
        ...     print(f"Yomitoki error: {e}")
    """
    pass


class InvalidArgumentError(YomitokiError, TypeError):
    """
    Raised when an entry point receives an argument of the wrong type.

    This is also a ``TypeError``, so callers that only know the builtin
    exception still catch it. The message names the offending function
    and the expected type.
    """

    def __init__(self, function_name: str, expected: str, value: object):
        super().__init__(
            f"[yomitoki] Argument of '{function_name}' must be {expected}, "
            f"got {type(value).__name__}."
        )
        self.function_name = function_name
        self.expected = expected


class EngineInitializationError(YomitokiError):
    """
    Raised when the morphological analyzer engine cannot be constructed.

    This exception is raised when:
    - Neither MeCab nor SudachiPy is installed
    - The engine is installed but its dictionary cannot be found
    - The engine constructor fails for any other reason

    Once raised by an AnalyzerHandle, the same error is raised again on
    every later use of that handle.
    """
    pass
