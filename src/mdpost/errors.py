"""Error types raised by mdpost.

Every failure is unrecoverable at the point it happens; the CLI reports
any ``MdpostError`` once and exits non-zero.
"""


class MdpostError(Exception):
    """Base error for all mdpost failures."""


class ConfigError(MdpostError):
    """Config file exists but cannot be read, decoded or validated."""


class ScanError(MdpostError):
    """Source markdown file cannot be opened or read."""


class PublishError(MdpostError):
    """Post file cannot be written."""


class GitError(MdpostError):
    """A git step of the deploy failed."""
