"""Shared exceptions raised by the required accessors."""


class EnvError(ValueError):
    """Base error for environment variable access."""

    def __init__(self, name: str, message: str):
        self.key_name = name
        super().__init__(message)


class EnvNotSetError(EnvError):
    """Required variable is absent or empty."""

    def __init__(self, name: str):
        super().__init__(name, f'required ENV "{name}" is not set')


class EnvParseError(EnvError):
    """Required variable is set but cannot be converted."""

    def __init__(self, name: str, value: str, expected: str, reason: str = ""):
        self.value = value
        self.expected = expected
        self.reason = reason
        message = f'required ENV "{name}" must be {expected} but it\'s "{value}"'
        if reason:
            message = f"{message}: {reason}"
        super().__init__(name, message)
