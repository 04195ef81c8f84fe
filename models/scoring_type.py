from enum import Enum


class ScoringType(str, Enum):
    """Ranking policy for a round. Points are always computed."""
    STABLEFORD = "stableford"    # most points wins
    STROKE_PLAY = "strokeplay"   # lowest net score wins
