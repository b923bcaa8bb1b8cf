"""AI-assisted commit message generation and validation."""

__version__ = "1.0.0"
