"""Create GitHub releases or lightweight tags from a pull request event."""

__version__ = "0.1.0"
