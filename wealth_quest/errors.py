class WealthQuestError(Exception):
    """Base class of the errors raised by Wealth Quest."""


class ScoreValidationError(WealthQuestError):
    """A submitted score payload is malformed."""


class PersistenceError(WealthQuestError):
    """The leaderboard storage could not be read or written."""


class IllegalTransitionError(WealthQuestError):
    """A session command was issued in a status that forbids it."""
