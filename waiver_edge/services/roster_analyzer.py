"""Roster composition analysis by position."""
from collections import Counter
from typing import List, Dict, Optional
from waiver_edge.models.player import Player, POSITIONS, SKILL_POSITIONS
from waiver_edge.models.analysis import RosterPositionAnalysis, PlayerMetrics
from waiver_edge.services.player_metrics import calculate_metrics, classify_risk_profile, finite_or_zero
from waiver_edge.services.scoring_config import STRENGTH_COEFFICIENTS, TARGET_DEPTH


class RosterAnalyzer:
    """
    Computes per-position depth and strength for a single roster.
    Kickers and defenses are left out of strength analysis; they only show
    up in the positional needs report.
    """

    def __init__(self, target_depth: Dict[str, int] = None):
        self.target_depth = dict(target_depth or TARGET_DEPTH)

    def analyze_roster(
        self,
        roster: List[Player],
        metrics: Optional[Dict[str, PlayerMetrics]] = None
    ) -> List[RosterPositionAnalysis]:
        """
        Analyze a roster's four skill-position groups.

        Args:
            roster: Players on the roster (any order)
            metrics: Optional precomputed metrics keyed by player_id

        Returns one record per position in QB, RB, WR, TE order, including
        empty groups (which have zero strength).
        """
        metrics = metrics or {}
        return [
            self._analyze_group(
                position,
                [p for p in roster if p.position == position],
                metrics
            )
            for position in SKILL_POSITIONS
        ]

    def get_position_needs(self, roster: List[Player]) -> Dict[str, bool]:
        """Flag every position whose depth is below its target depth."""
        counts = Counter(p.position for p in roster)
        return {
            position: counts.get(position, 0) < self.target_depth.get(position, 0)
            for position in POSITIONS
        }

    def get_position_counts(self, roster: List[Player]) -> Dict[str, int]:
        counts = Counter(p.position for p in roster)
        return {position: counts.get(position, 0) for position in POSITIONS}

    def _analyze_group(
        self,
        position: str,
        players: List[Player],
        metrics: Dict[str, PlayerMetrics]
    ) -> RosterPositionAnalysis:
        target_depth = self.target_depth.get(position, 0)
        if not players:
            return RosterPositionAnalysis(position=position, target_depth=target_depth)

        group_metrics = [metrics.get(p.player_id) or calculate_metrics(p) for p in players]

        season_avgs = [finite_or_zero(p.season_avg) for p in players]
        depth = len(players)
        avg_score = sum(season_avgs) / depth
        top_score = max(season_avgs)
        avg_floor = sum(m.floor for m in group_metrics) / depth
        avg_ceiling = sum(m.ceiling for m in group_metrics) / depth
        avg_risk_coeff = sum(m.risk_coeff for m in group_metrics) / depth

        strength = (
            top_score * STRENGTH_COEFFICIENTS['top_score'] +
            avg_floor * STRENGTH_COEFFICIENTS['avg_floor'] +
            avg_score * STRENGTH_COEFFICIENTS['avg_score'] +
            depth * STRENGTH_COEFFICIENTS['depth']
        )

        bye_weeks = Counter(p.bye_week for p in players if p.bye_week is not None)

        return RosterPositionAnalysis(
            position=position,
            depth=depth,
            avg_score=avg_score,
            top_score=top_score,
            avg_floor=avg_floor,
            avg_ceiling=avg_ceiling,
            strength=strength,
            risk_profile=classify_risk_profile(avg_risk_coeff),
            target_depth=target_depth,
            bye_weeks=dict(bye_weeks),
        )


def analyze_roster(roster: List[Player]) -> List[RosterPositionAnalysis]:
    """Analyze a roster with the default target depths."""
    return RosterAnalyzer().analyze_roster(roster)
