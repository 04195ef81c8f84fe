class RoundError(Exception):
    """Base for all round errors."""


class RoundCompleteError(RoundError):
    """Round is already finished and can no longer change."""


class PlayerNotFoundError(RoundError):
    """No player at the given position in the round."""


class HoleOutOfRangeError(RoundError):
    """Hole number is outside the holes being played."""
