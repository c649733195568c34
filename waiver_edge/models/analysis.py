"""Analysis inputs and derived records for the recommendation pipeline."""
from dataclasses import dataclass, field, asdict
from typing import Optional, Dict, List


@dataclass
class AnalysisWeights:
    """
    User-controlled knobs, each 0-100.

    roster_balance: 0 = prioritize filling positional holes, 100 = best player available
    risk: 0 = favor floor/consistency, 100 = favor ceiling/upside
    """
    roster_balance: float = 50.0
    risk: float = 50.0

    def __post_init__(self):
        self.roster_balance = _clamp_weight(self.roster_balance)
        self.risk = _clamp_weight(self.risk)

    @property
    def prefers_roster_holes(self) -> bool:
        return self.roster_balance < 50

    def to_dict(self):
        return {'roster_balance': self.roster_balance, 'risk': self.risk}

    @classmethod
    def from_dict(cls, data: Optional[dict]):
        """Create weights from a request body; accepts rosterBalance or roster_balance."""
        data = data or {}
        roster_balance = data.get('roster_balance', data.get('rosterBalance', 50))
        risk = data.get('risk', 50)
        return cls(roster_balance=roster_balance, risk=risk)


@dataclass(frozen=True)
class PlayerMetrics:
    """Distribution statistics derived from a player's weekly scores."""
    mean: float
    std_dev: float
    floor: float  # 10th percentile
    ceiling: float  # 90th percentile
    risk_coeff: float  # coefficient of variation
    trend: float  # recent vs season, as a fraction
    risk_profile: str  # safe / balanced / volatile


@dataclass
class RosterPositionAnalysis:
    """Per-position aggregate of a roster snapshot."""
    position: str
    depth: int = 0
    avg_score: float = 0.0
    top_score: float = 0.0
    avg_floor: float = 0.0
    avg_ceiling: float = 0.0
    strength: float = 0.0
    risk_profile: str = 'balanced'
    target_depth: int = 0
    bye_weeks: Dict[int, int] = field(default_factory=dict)  # bye week -> players

    @property
    def needs_player(self) -> bool:
        """True when the group is below its target depth."""
        return self.depth < self.target_depth

    def to_dict(self):
        data = asdict(self)
        data['needs_player'] = self.needs_player
        return data


def _clamp_weight(value) -> float:
    try:
        value = float(value)
    except (ValueError, TypeError):
        return 50.0
    if value != value:  # NaN
        return 50.0
    return max(0.0, min(100.0, value))


def average_strength(roster_analysis: List[RosterPositionAnalysis]) -> float:
    """Mean strength across all position groups (0 for an empty analysis)."""
    if not roster_analysis:
        return 0.0
    return sum(p.strength for p in roster_analysis) / len(roster_analysis)


def find_position(roster_analysis: List[RosterPositionAnalysis], position: str) -> Optional[RosterPositionAnalysis]:
    for analysis in roster_analysis:
        if analysis.position == position:
            return analysis
    return None
