"""Exceptions raised by the logger"""


class FilterSyntaxError(ValueError):
    """
    Raised when a facility filter expression cannot be compiled.

    Attributes:
        token: The offending comma-separated token, as written
        reason: Error reported by the regular expression compiler
    """

    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"Invalid filter pattern {token!r}: {reason}")
