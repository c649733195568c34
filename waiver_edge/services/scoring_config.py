"""
Recommendation scoring configuration.

The score is a weighted sum of five components, each on roughly a 0-100 scale:
- Value: expert consensus rank vs. advanced model rank (contrarian value)
- Opportunity: low ownership
- Performance: season average plus recent trend
- Risk: floor/ceiling blend driven by the user's risk knob
- Usage: snap share, target share and red-zone work

The weighted total is then scaled by the roster-hole multiplier.
"""

# Component weights (must sum to 1.0)
COMPONENT_WEIGHTS = {
    'value': 0.25,        # Value vs consensus
    'opportunity': 0.20,  # Low ownership opportunity
    'performance': 0.25,  # Season production & trend
    'risk': 0.20,         # Risk-adjusted floor/ceiling
    'usage': 0.10,        # Usage opportunity
}

# Per-component scaling
VALUE_RANK_GAP_SCALE = 2.0
OPPORTUNITY_SCALE = 0.5
PERFORMANCE_AVG_SCALE = 2.0
PERFORMANCE_TREND_SCALE = 50.0
USAGE_SCALES = {
    'QB': {'snap_share': 0.3},
    'default': {'snap_share': 0.2, 'target_share': 100.0, 'red_zone_shares': 5.0},
}

# Roster strength = 0.4*top + 0.3*avg floor + 0.2*avg + 2*depth
STRENGTH_COEFFICIENTS = {
    'top_score': 0.4,
    'avg_floor': 0.3,
    'avg_score': 0.2,
    'depth': 2.0,
}

# Coefficient-of-variation thresholds for risk profiles
SAFE_RISK_COEFF = 0.15
VOLATILE_RISK_COEFF = 0.30

# Percentile positions in the ascending-sorted weekly scores
FLOOR_PERCENTILE = 0.10
CEILING_PERCENTILE = 0.90
RECENT_WEEKS = 4

# Roster-hole multiplier
MULTIPLIER_MIN = 0.5
MULTIPLIER_MAX = 2.0
HOLE_GAP_SCALE = 2.0  # when filling holes
BPA_GAP_CAP = 0.1  # when taking best available
RISK_COMPLEMENT_BONUS = {
    ('safe', 'volatile'): 0.3,  # safe group, volatile candidate: adds upside
    ('volatile', 'safe'): 0.4,  # volatile group, safe candidate: adds stability
}
BYE_WEEK_PENALTY = 0.8
BYE_WEEK_MAX_SHARED = 1  # penalty when more than this many share the bye

# Reason generator thresholds
REASON_POSITION_NEED_MAX_BALANCE = 60
REASON_RANK_GAP = 5
REASON_LOW_OWNERSHIP = 15
REASON_TRENDING_UP = 0.15
REASON_RISK_SEEKING = 60
REASON_HIGH_CEILING_RATIO = 1.3
REASON_RISK_AVERSE = 40
REASON_CONSISTENT_RISK_COEFF = 0.30
REASON_MAX_CLAUSES = 2
REASON_FALLBACK = "Strong overall metrics"

# Presentation views: (min score, exclusive; top N)
VIEW_CUTOFFS = {
    'waiver': (50, 10),
    'trade_targets': (60, 6),
}

# Typical roster construction
TARGET_DEPTH = {
    'QB': 2,
    'RB': 4,
    'WR': 5,
    'TE': 2,
    'K': 1,
    'DEF': 1,
}

STRATEGY_PRESETS = {
    'aggressive': {'roster_balance': 80, 'risk': 75},
    'conservative': {'roster_balance': 30, 'risk': 25},
    'balanced': {'roster_balance': 50, 'risk': 50},
}


def get_component_weight(component: str) -> float:
    """
    Get the weight of a score component.

    Args:
        component: One of 'value', 'opportunity', 'performance', 'risk', 'usage'

    Returns:
        Weight (0.0 to 1.0); 0.0 for unknown components
    """
    return COMPONENT_WEIGHTS.get(component, 0.0)


def get_usage_scales(position: str) -> dict:
    """Usage scaling factors for a position (QBs only count snap share)."""
    return USAGE_SCALES.get(position, USAGE_SCALES['default'])


def get_strategy_preset(name: str) -> dict:
    """
    Get weights for a named strategy.

    Raises:
        KeyError: if the preset does not exist
    """
    if name not in STRATEGY_PRESETS:
        raise KeyError(f"Unknown strategy preset: {name}")
    return dict(STRATEGY_PRESETS[name])


def describe_strategy(roster_balance: float, risk: float) -> str:
    """
    Short label for a pair of weights, as shown next to the strategy sliders.

    Args:
        roster_balance: 0-100, high = best player available
        risk: 0-100, high = chase ceiling
    """
    if roster_balance > 70 and risk > 70:
        return "Maximum Edge Hunter - Best available talent, high ceiling plays"
    elif roster_balance < 30 and risk < 30:
        return "Safe Floor Strategy - Fill roster holes with guaranteed production"
    elif roster_balance > 60:
        return "Best Available Hunter - Talent over positional need"
    elif risk > 60:
        return "Boom/Bust Specialist - Chasing league-winning upside"
    return "Balanced Approach - Mix of safety and upside"
