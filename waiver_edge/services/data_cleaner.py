"""Data cleaning and validation service."""
from typing import List, Dict, Optional, Tuple
from waiver_edge.models.player import Player, POSITIONS


# field -> (min, max); None means unbounded on that side
FIELD_RANGES = {
    'ownership': (0.0, 100.0),
    'snap_share': (0.0, 100.0),
    'target_share': (0.0, 1.0),
    'red_zone_shares': (0, None),
    'expert_rank': (1, None),
    'advanced_rank': (1, None),
}
INTEGER_FIELDS = {'red_zone_shares', 'expert_rank', 'advanced_rank'}
MISSING_DEFAULTS = {'expert_rank': 999, 'advanced_rank': 999}  # unranked
BYE_WEEK_RANGE = (1, 18)

POSITION_ALIASES = {
    'D/ST': 'DEF',
    'DST': 'DEF',
    'D': 'DEF',
    'PK': 'K',
}


class DataCleaner:
    """
    Cleans and validates player records before they reach the scorer.
    Out-of-range numbers are clamped and flagged; records that cannot be
    scored at all (no name, unknown position) are dropped.
    """

    def clean_and_validate_players(
        self,
        players: List[Player],
        exclude_ids: Optional[set] = None
    ) -> Dict:
        """
        Clean and validate player data.

        Args:
            players: Raw players from an API client or loader
            exclude_ids: Player ids to skip (e.g. players already rostered)

        Returns:
            Dict with:
            - cleaned_players: List of cleaned Player objects
            - issues: List of data quality issues
            - statistics: Data quality statistics
        """
        exclude_ids = exclude_ids or set()
        issues = []
        statistics = {
            'total_players': len(players),
            'players_with_complete_data': 0,
            'players_with_invalid_data': 0,
            'players_clamped': 0,
            'duplicates_found': 0,
            'excluded': 0,
        }

        cleaned_players = []
        seen_ids = set()

        for player in players:
            if player.player_id in exclude_ids:
                statistics['excluded'] += 1
                continue

            if player.player_id in seen_ids:
                statistics['duplicates_found'] += 1
                issues.append({
                    'type': 'duplicate',
                    'player': player.name,
                    'severity': 'warning',
                    'message': f'Duplicate player found: {player.name}'
                })
                continue
            seen_ids.add(player.player_id)

            validation_result = self.validate_player(player)
            if not validation_result['is_valid']:
                statistics['players_with_invalid_data'] += 1
                issues.extend(validation_result['issues'])
                continue

            cleaned_player, clamp_issues = self.clean_player(player)
            if clamp_issues:
                statistics['players_clamped'] += 1
                issues.extend(clamp_issues)
            else:
                statistics['players_with_complete_data'] += 1
            cleaned_players.append(cleaned_player)

        if issues:
            print(f"WARNING: {len(issues)} data issues in {len(players)} players "
                  f"({statistics['players_with_invalid_data']} dropped)")

        return {
            'cleaned_players': cleaned_players,
            'issues': issues,
            'statistics': statistics
        }

    def validate_player(self, player: Player) -> Dict:
        """
        Validate a player object.

        Returns:
            Dict with 'is_valid' bool and 'issues' list
        """
        issues = []

        if not player.name or not str(player.name).strip():
            issues.append({
                'type': 'missing_name',
                'player': player.player_id,
                'severity': 'error',
                'message': 'Player missing name'
            })

        if normalize_position(player.position) not in POSITIONS:
            issues.append({
                'type': 'invalid_position',
                'player': player.name,
                'severity': 'error',
                'message': f'{player.name} has unknown position: {player.position!r}'
            })

        return {
            'is_valid': len([i for i in issues if i['severity'] == 'error']) == 0,
            'issues': issues
        }

    def clean_player(self, player: Player) -> Tuple[Player, List[Dict]]:
        """
        Clamp numeric fields into their valid ranges.

        Returns (cleaned player, list of clamp warnings).
        """
        issues = []
        changes = {'position': normalize_position(player.position)}

        for field_name, (low, high) in FIELD_RANGES.items():
            raw = getattr(player, field_name)
            value = _safe_float(raw)
            if value is None:
                value = float(MISSING_DEFAULTS.get(field_name, 0))
            clamped = value
            if low is not None:
                clamped = max(low, clamped)
            if high is not None:
                clamped = min(high, clamped)
            if clamped != value:
                issues.append({
                    'type': 'out_of_range',
                    'player': player.name,
                    'severity': 'warning',
                    'message': f'{player.name} {field_name} {raw} clamped to {clamped}'
                })
            if field_name in INTEGER_FIELDS:
                clamped = int(round(clamped))
            changes[field_name] = clamped

        for field_name in ('season_avg', 'recent_avg'):
            value = _safe_float(getattr(player, field_name))
            changes[field_name] = value if value is not None else 0.0

        weekly_scores = tuple(
            score for score in (_safe_float(s) for s in player.weekly_scores)
            if score is not None
        )
        if len(weekly_scores) != len(player.weekly_scores):
            issues.append({
                'type': 'invalid_weekly_score',
                'player': player.name,
                'severity': 'warning',
                'message': f'{player.name} had {len(player.weekly_scores) - len(weekly_scores)} unusable weekly scores'
            })
        changes['weekly_scores'] = weekly_scores

        bye_week = _safe_int(player.bye_week)
        if bye_week is not None and not (BYE_WEEK_RANGE[0] <= bye_week <= BYE_WEEK_RANGE[1]):
            issues.append({
                'type': 'out_of_range',
                'player': player.name,
                'severity': 'warning',
                'message': f'{player.name} bye week {bye_week} ignored'
            })
            bye_week = None
        changes['bye_week'] = bye_week

        return player.with_updates(**changes), issues


def normalize_position(position) -> str:
    """Upper-case a position and map common aliases (D/ST -> DEF)."""
    if not position:
        return ''
    position = str(position).strip().upper()
    return POSITION_ALIASES.get(position, position)


def _safe_float(value) -> Optional[float]:
    """Safely convert value to a finite float."""
    if value is None or value == '':
        return None
    try:
        value = float(value)
    except (ValueError, TypeError):
        return None
    if value != value or value in (float('inf'), float('-inf')):
        return None
    return value


def _safe_int(value) -> Optional[int]:
    """Safely convert value to int."""
    value = _safe_float(value)
    return int(value) if value is not None else None
