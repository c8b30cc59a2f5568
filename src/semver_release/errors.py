"""Errors raised while running the release action."""


class ReleaseActionError(Exception):
    """Base error. Each subclass names the phase that failed."""

    prefix = "release action failed"

    def __init__(self, detail: str | BaseException):
        self.detail = str(detail)
        super().__init__(f"{self.prefix}: {self.detail}")


class InvalidRepositoryError(ReleaseActionError):
    prefix = "invalid repository"


class EventReadError(ReleaseActionError):
    prefix = "could not read GitHub event file"


class EventParseError(ReleaseActionError):
    prefix = "could not parse GitHub event"


class ReleaseCreationError(ReleaseActionError):
    prefix = "could not create GitHub release"


class TagCreationError(ReleaseActionError):
    prefix = "could not create lightweight tag"


class UnknownStrategyError(ReleaseActionError):
    prefix = "unknown release strategy"


class ConfigurationError(ReleaseActionError):
    prefix = "invalid configuration"


class EventOpenError(EventReadError):
    prefix = "could not open GitHub event file"
