"""Distribution statistics from a player's weekly fantasy scores."""
from typing import Dict, Iterable, List
import numpy as np
from waiver_edge.models.player import Player
from waiver_edge.models.analysis import PlayerMetrics
from waiver_edge.services.scoring_config import (
    SAFE_RISK_COEFF, VOLATILE_RISK_COEFF,
    FLOOR_PERCENTILE, CEILING_PERCENTILE, RECENT_WEEKS
)


def calculate_metrics(player: Player) -> PlayerMetrics:
    """
    Calculate mean, spread, floor/ceiling, volatility and trend for a player.

    Floor and ceiling are the values at the 10th/90th percentile positions of
    the ascending-sorted weekly scores (index = floor(N * p)). With no weekly
    scores every metric falls back to the player's season/recent averages, so
    the result never contains NaN.
    """
    scores = _finite_scores(player.weekly_scores)

    if scores.size == 0:
        mean = finite_or_zero(player.season_avg)
        trend = _safe_ratio(finite_or_zero(player.recent_avg) - mean, mean)
        return PlayerMetrics(
            mean=mean,
            std_dev=0.0,
            floor=mean,
            ceiling=mean,
            risk_coeff=0.0,
            trend=trend,
            risk_profile=classify_risk_profile(0.0),
        )

    sorted_scores = np.sort(scores)
    count = sorted_scores.size
    mean = float(scores.mean())
    std_dev = float(scores.std())  # population (divide by N)

    floor = float(sorted_scores[_percentile_index(count, FLOOR_PERCENTILE)])
    ceiling = float(sorted_scores[_percentile_index(count, CEILING_PERCENTILE)])
    # Keep floor <= mean <= ceiling for skewed samples
    floor = min(floor, mean)
    ceiling = max(ceiling, mean)

    risk_coeff = _safe_ratio(std_dev, abs(mean))

    # Fewer than RECENT_WEEKS scores: the window is everything we have
    recent_mean = float(scores[-RECENT_WEEKS:].mean())
    trend = _safe_ratio(recent_mean - mean, mean)

    return PlayerMetrics(
        mean=mean,
        std_dev=std_dev,
        floor=floor,
        ceiling=ceiling,
        risk_coeff=risk_coeff,
        trend=trend,
        risk_profile=classify_risk_profile(risk_coeff),
    )


def calculate_metrics_for_players(players: List[Player]) -> Dict[str, PlayerMetrics]:
    """Metrics for each player, keyed by player_id."""
    return {player.player_id: calculate_metrics(player) for player in players}


def classify_risk_profile(risk_coeff: float) -> str:
    """safe (< 0.15), volatile (> 0.30), otherwise balanced."""
    if risk_coeff < SAFE_RISK_COEFF:
        return 'safe'
    if risk_coeff > VOLATILE_RISK_COEFF:
        return 'volatile'
    return 'balanced'


def _finite_scores(weekly_scores: Iterable[float]) -> np.ndarray:
    scores = np.asarray([_float_or_nan(s) for s in weekly_scores or ()], dtype=float)
    return scores[np.isfinite(scores)]


def _float_or_nan(value) -> float:
    try:
        return float(value)
    except (ValueError, TypeError):
        return float('nan')


def _percentile_index(count: int, percentile: float) -> int:
    return min(int(np.floor(count * percentile)), count - 1)


def _safe_ratio(numerator: float, denominator: float) -> float:
    if not denominator:
        return 0.0
    ratio = numerator / denominator
    return float(ratio) if np.isfinite(ratio) else 0.0


def finite_or_zero(value) -> float:
    """Treat missing or non-finite inputs as zero."""
    try:
        value = float(value)
    except (ValueError, TypeError):
        return 0.0
    return value if np.isfinite(value) else 0.0
