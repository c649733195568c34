"""Player data model for fantasy football recommendations."""
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple


POSITIONS = ['QB', 'RB', 'WR', 'TE', 'K', 'DEF']
SKILL_POSITIONS = ['QB', 'RB', 'WR', 'TE']

# camelCase keys sent by the front end -> dataclass field names
_CAMEL_CASE_FIELDS = {
    'id': 'player_id',
    'playerId': 'player_id',
    'seasonAvg': 'season_avg',
    'recentAvg': 'recent_avg',
    'weeklyScores': 'weekly_scores',
    'expertRank': 'expert_rank',
    'advancedRank': 'advanced_rank',
    'targetShare': 'target_share',
    'snapShare': 'snap_share',
    'redZoneShares': 'red_zone_shares',
    'byeWeek': 'bye_week',
    'nflTeam': 'team',
}


@dataclass(frozen=True)
class Player:
    """Represents one athlete's observed and projected fantasy output."""
    player_id: str
    name: str
    position: str  # QB, RB, WR, TE, K, DEF
    team: Optional[str] = None

    # Production
    season_avg: float = 0.0
    recent_avg: float = 0.0
    weekly_scores: Tuple[float, ...] = field(default_factory=tuple)  # chronological

    # Market / rankings
    ownership: float = 0.0  # % of leagues rostered, 0-100
    expert_rank: int = 999  # consensus rank, lower is better
    advanced_rank: int = 999  # model rank, lower is better

    # Usage
    target_share: float = 0.0  # 0-1
    snap_share: float = 0.0  # 0-100
    red_zone_shares: int = 0

    bye_week: Optional[int] = None  # 1-18

    def to_dict(self):
        """Convert player to dictionary."""
        return {
            'player_id': self.player_id,
            'name': self.name,
            'position': self.position,
            'team': self.team,
            'season_avg': self.season_avg,
            'recent_avg': self.recent_avg,
            'weekly_scores': list(self.weekly_scores),
            'ownership': self.ownership,
            'expert_rank': self.expert_rank,
            'advanced_rank': self.advanced_rank,
            'target_share': self.target_share,
            'snap_share': self.snap_share,
            'red_zone_shares': self.red_zone_shares,
            'bye_week': self.bye_week,
        }

    @classmethod
    def from_dict(cls, data: dict):
        """
        Create player from dictionary.

        Accepts snake_case field names or the camelCase keys used by the
        web client. Unknown keys are ignored. A missing player_id is derived
        from the name.
        """
        kwargs = {}
        known_fields = cls.__dataclass_fields__
        for key, value in data.items():
            field_name = _CAMEL_CASE_FIELDS.get(key, key)
            if field_name in known_fields:
                kwargs[field_name] = value

        if 'weekly_scores' in kwargs:
            weekly_scores = kwargs['weekly_scores'] or ()
            if not isinstance(weekly_scores, (list, tuple)):
                raise TypeError(f"weekly_scores must be a list, got {type(weekly_scores).__name__}")
            kwargs['weekly_scores'] = tuple(weekly_scores)
        if kwargs.get('name') is not None:
            kwargs['name'] = str(kwargs['name'])
        if not kwargs.get('player_id'):
            kwargs['player_id'] = make_player_id(kwargs.get('name') or '')
        else:
            kwargs['player_id'] = str(kwargs['player_id'])
        return cls(**kwargs)

    def with_updates(self, **changes) -> 'Player':
        """Return a copy of this player with the given fields replaced."""
        return replace(self, **changes)


@dataclass(frozen=True)
class ScoredPlayer:
    """A player plus the recommendation score and the reason behind it."""
    player: Player
    score: int
    reason: str

    def to_dict(self):
        data = self.player.to_dict()
        data['score'] = self.score
        data['reason'] = self.reason
        return data


def make_player_id(name: str) -> str:
    """Build a stable id from a display name ("Tucker Kraft" -> "tucker_kraft")."""
    return name.strip().lower().replace(' ', '_').replace('.', '').replace("'", "")
