"""Error types raised by ai-commit."""


class AICommitError(Exception):
    """Base class for all ai-commit errors."""


class InputError(AICommitError):
    """The raw message handed to the formatter is unusable."""


class EmptyInputError(InputError):
    def __init__(self, message: str = "Invalid input: message must be a non-empty string"):
        super().__init__(message)


class EmptyMessageError(InputError):
    def __init__(self, message: str = "Generated message is empty"):
        super().__init__(message)


class UnsupportedStyleError(AICommitError):
    def __init__(self, style: object):
        self.style = style
        super().__init__(f"Unsupported commit style: {style}")


class ProviderError(AICommitError):
    """A backend failed to produce commit message text."""

    def __init__(self, provider_name: str, message: str):
        self.provider_name = provider_name
        self.detail = message
        super().__init__(f"{provider_name} API error: {message}")


class ProviderTimeoutError(ProviderError):
    pass


class ConfigError(AICommitError):
    pass


class GitError(AICommitError):
    pass
