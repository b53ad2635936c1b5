"""
Name: errors
Description: exceptions shared by the textutils tools
License: perl
"""


class ConfigError(ValueError):
    """A command line that cannot be acted upon. Raised before any input is read."""


class InvalidListValue(ConfigError):
    """A position list token that is not a positive decimal number or range."""

    def __init__(self, value: str):
        self.value = value
        super().__init__(f'illegal list value: "{value}"')


class InvalidRangeOrder(ConfigError):
    """A bounded range whose first number is larger than its second."""

    def __init__(self, start: int, end: int):
        self.start = start
        self.end = end
        super().__init__(
            f"First number in range ({start}) must be lower than or equal to "
            f"second number ({end})"
        )


class FileAccessError(OSError):
    """An input that could not be opened or read."""

    def __init__(self, path: str, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(cause.errno, reason, path)

    def __str__(self):
        return f"{self.path}: {self.strerror}"
