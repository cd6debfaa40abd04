"""
Linear scoring model for global alignment (match / mismatch / gap)
"""

from dataclasses import dataclass
from numbers import Integral


@dataclass(frozen=True)
class ScoringModel:
    """
    Uniform scoring applied to every position.

    Attributes:
        match: score for two identical symbols (default +1)
        mismatch: score for two different symbols (default -1)
        gap_penalty: score for a symbol aligned against a gap (default -1)
    """
    match: int = 1
    mismatch: int = -1
    gap_penalty: int = -1

    def __post_init__(self):
        for name in ("match", "mismatch", "gap_penalty"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, Integral):
                raise ValueError(f"Scoring value '{name}' must be an integer, got: {value!r}")
            # numpy integers -> plain int
            object.__setattr__(self, name, int(value))

    def substitution_score(self, a, b) -> int:
        """Score of aligning symbol a against symbol b"""
        return self.match if a == b else self.mismatch

    def gap(self) -> int:
        return self.gap_penalty


DEFAULT_SCORING = ScoringModel()
