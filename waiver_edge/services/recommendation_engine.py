"""Recommendation engine for waiver and trade pickups."""
import math
from typing import List, Dict, Optional
from waiver_edge.models.player import Player, ScoredPlayer
from waiver_edge.models.analysis import (
    AnalysisWeights, PlayerMetrics, RosterPositionAnalysis,
    average_strength, find_position
)
from waiver_edge.services.player_metrics import calculate_metrics, finite_or_zero
from waiver_edge.services.roster_analyzer import RosterAnalyzer
from waiver_edge.services import scoring_config as config


class RecommendationEngine:
    """
    Scores candidate players against a roster and the user's weights.

    Every call recomputes from the snapshot it is given; nothing is cached
    between calls and the same inputs always produce the same scores.
    """

    def __init__(self, roster_analyzer: RosterAnalyzer = None):
        self.roster_analyzer = roster_analyzer or RosterAnalyzer()

    def rank_candidates(
        self,
        candidates: List[Player],
        roster: List[Player],
        weights: AnalysisWeights
    ) -> List[ScoredPlayer]:
        """
        Score and explain every candidate, best first.

        Args:
            candidates: Available players, already deduplicated against the roster
            roster: The user's current roster
            weights: User's roster-balance and risk preferences

        Returns ScoredPlayer list sorted by score (ties keep input order).
        """
        if not candidates:
            return []

        roster_analysis = self.roster_analyzer.analyze_roster(roster)

        scored = []
        for player in candidates:
            metrics = calculate_metrics(player)
            score = self.score_candidate(player, roster_analysis, weights, roster, metrics=metrics)
            reason = self.explain_recommendation(player, metrics, roster_analysis, weights)
            scored.append(ScoredPlayer(player=player, score=score, reason=reason))

        ranked = sort_scored_players(scored)

        top_3 = [f"{s.player.name}: {s.score}" for s in ranked[:3]]
        print(f"DEBUG: Ranked {len(ranked)} candidates - Max: {ranked[0].score}, Min: {ranked[-1].score}, Top 3: {top_3}")

        return ranked

    def build_views(
        self,
        candidates: List[Player],
        roster: List[Player],
        weights: AnalysisWeights
    ) -> Dict:
        """
        Slice rankings into the views shown to the user.

        Returns dict with:
        - waiver: candidates scoring above 50, top 10
        - trade_targets: candidates scoring above 60, top 6
        - my_roster: every rostered player scored against the roster, no threshold
        - roster_analysis: per-position analysis of the roster
        - needs: position -> below target depth
        """
        ranked = self.rank_candidates(candidates, roster, weights)
        my_roster = self.rank_candidates(roster, roster, weights)

        min_waiver, top_waiver = config.VIEW_CUTOFFS['waiver']
        min_trade, top_trade = config.VIEW_CUTOFFS['trade_targets']

        return {
            'waiver': [s for s in ranked if s.score > min_waiver][:top_waiver],
            'trade_targets': [s for s in ranked if s.score > min_trade][:top_trade],
            'my_roster': my_roster,
            'roster_analysis': self.roster_analyzer.analyze_roster(roster),
            'needs': self.roster_analyzer.get_position_needs(roster),
        }

    def score_candidate(
        self,
        player: Player,
        roster_analysis: List[RosterPositionAnalysis],
        weights: AnalysisWeights,
        roster: Optional[List[Player]] = None,
        metrics: Optional[PlayerMetrics] = None
    ) -> int:
        """
        Weighted sum of the five component scores, scaled by the roster-hole
        multiplier and rounded half up. Never negative, never NaN.
        """
        if metrics is None:
            metrics = calculate_metrics(player)

        components = self.score_components(player, metrics, weights)
        total_score = sum(
            components[name] * config.get_component_weight(name)
            for name in components
        )

        total_score *= self.get_roster_hole_multiplier(
            player, roster_analysis, weights, roster, metrics
        )

        if not math.isfinite(total_score):
            return 0
        return max(0, int(math.floor(total_score + 0.5)))

    def score_components(
        self,
        player: Player,
        metrics: PlayerMetrics,
        weights: AnalysisWeights
    ) -> Dict[str, float]:
        """
        Component scores on roughly a 0-100 scale.

        Returns dict of value, opportunity, performance, risk, usage.
        """
        # Model ranks the player better than consensus
        rank_gap = finite_or_zero(player.expert_rank) - finite_or_zero(player.advanced_rank)
        value_score = max(0.0, rank_gap) * config.VALUE_RANK_GAP_SCALE

        ownership = max(0.0, min(100.0, finite_or_zero(player.ownership)))
        opportunity_score = (100 - ownership) * config.OPPORTUNITY_SCALE

        performance_score = (
            finite_or_zero(player.season_avg) * config.PERFORMANCE_AVG_SCALE +
            metrics.trend * config.PERFORMANCE_TREND_SCALE
        )

        risk_weight = weights.risk / 100
        risk_score = metrics.floor * (1 - risk_weight) + metrics.ceiling * risk_weight

        return {
            'value': value_score,
            'opportunity': opportunity_score,
            'performance': performance_score,
            'risk': risk_score,
            'usage': self._usage_score(player),
        }

    def get_roster_hole_multiplier(
        self,
        player: Player,
        roster_analysis: List[RosterPositionAnalysis],
        weights: AnalysisWeights,
        roster: Optional[List[Player]] = None,
        metrics: Optional[PlayerMetrics] = None
    ) -> float:
        """
        Multiplier in [0.5, 2.0] that boosts candidates at weak positions.

        Below 50 roster balance the gap to the average position strength
        drives the boost (plus a bonus when the candidate's risk profile
        complements the weak group); at 50 or above the boost is capped at
        0.1. A bye-week pile-up costs 0.8. The whole deviation from 1.0 is
        then scaled by (100 - roster_balance) / 100.
        """
        if metrics is None:
            metrics = calculate_metrics(player)

        avg_strength = average_strength(roster_analysis)
        group = find_position(roster_analysis, player.position)

        # K/DEF are not part of strength analysis and never count as holes
        gap = max(0.0, avg_strength - group.strength) if group else 0.0
        gap_ratio = gap / avg_strength if avg_strength > 0 else 0.0

        if weights.prefers_roster_holes:
            adjustment = gap_ratio * config.HOLE_GAP_SCALE
            if gap > 0:
                adjustment += config.RISK_COMPLEMENT_BONUS.get(
                    (group.risk_profile, metrics.risk_profile), 0.0
                )
        else:
            adjustment = min(config.BPA_GAP_CAP, gap_ratio)

        if self._has_bye_week_collision(player, roster):
            adjustment -= config.BYE_WEEK_PENALTY

        adjustment *= (100 - weights.roster_balance) / 100

        return max(config.MULTIPLIER_MIN, min(config.MULTIPLIER_MAX, 1 + adjustment))

    def explain_recommendation(
        self,
        player: Player,
        metrics: PlayerMetrics,
        roster_analysis: List[RosterPositionAnalysis],
        weights: AnalysisWeights
    ) -> str:
        """
        Build a 1-2 clause explanation.

        Conditions are checked in priority order: position need, contrarian
        rank gap, low ownership, upward trend, ceiling for risk seekers,
        consistency for risk-averse users. The first two that apply are
        joined with ". ".
        """
        reasons = []

        group = find_position(roster_analysis, player.position)
        if (group is not None
                and group.strength < average_strength(roster_analysis)
                and weights.roster_balance < config.REASON_POSITION_NEED_MAX_BALANCE):
            reasons.append(f"Fills {player.position} roster hole")

        expert_rank = int(finite_or_zero(player.expert_rank))
        advanced_rank = int(finite_or_zero(player.advanced_rank))
        ownership = finite_or_zero(player.ownership)

        if expert_rank - advanced_rank > config.REASON_RANK_GAP:
            reasons.append(f"Expert rank #{expert_rank} vs advanced #{advanced_rank}")

        if ownership < config.REASON_LOW_OWNERSHIP:
            reasons.append(f"Only {ownership:g}% owned")

        if metrics.trend > config.REASON_TRENDING_UP:
            reasons.append("Recent form trending up")

        if (weights.risk > config.REASON_RISK_SEEKING
                and metrics.ceiling > finite_or_zero(player.season_avg) * config.REASON_HIGH_CEILING_RATIO):
            reasons.append("High ceiling upside play")

        if (weights.risk < config.REASON_RISK_AVERSE
                and metrics.risk_coeff < config.REASON_CONSISTENT_RISK_COEFF):
            reasons.append("Consistent floor play")

        return ". ".join(reasons[:config.REASON_MAX_CLAUSES]) or config.REASON_FALLBACK

    def _usage_score(self, player: Player) -> float:
        """QBs: snap share only. Everyone else: snaps, targets and red-zone work."""
        scales = config.get_usage_scales(player.position)
        return (
            finite_or_zero(player.snap_share) * scales.get('snap_share', 0.0) +
            finite_or_zero(player.target_share) * scales.get('target_share', 0.0) +
            finite_or_zero(player.red_zone_shares) * scales.get('red_zone_shares', 0.0)
        )

    def _has_bye_week_collision(self, player: Player, roster: Optional[List[Player]]) -> bool:
        """More than one same-position rostered player shares the candidate's bye."""
        if not roster or player.bye_week is None:
            return False
        shared = sum(
            1 for p in roster
            if p.position == player.position
            and p.bye_week == player.bye_week
            and p.player_id != player.player_id
        )
        return shared > config.BYE_WEEK_MAX_SHARED


def sort_scored_players(scored: List[ScoredPlayer]) -> List[ScoredPlayer]:
    """Highest score first; equal scores keep their original order."""
    return sorted(scored, key=lambda s: s.score, reverse=True)


_default_engine = RecommendationEngine()


def score_candidate(
    player: Player,
    roster_analysis: List[RosterPositionAnalysis],
    weights: AnalysisWeights,
    roster: Optional[List[Player]] = None
) -> int:
    return _default_engine.score_candidate(player, roster_analysis, weights, roster)


def explain_recommendation(
    player: Player,
    metrics: PlayerMetrics,
    roster_analysis: List[RosterPositionAnalysis],
    weights: AnalysisWeights
) -> str:
    return _default_engine.explain_recommendation(player, metrics, roster_analysis, weights)


def rank_candidates(
    candidates: List[Player],
    roster: List[Player],
    weights: AnalysisWeights
) -> List[ScoredPlayer]:
    return _default_engine.rank_candidates(candidates, roster, weights)
