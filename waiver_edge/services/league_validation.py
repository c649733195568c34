"""Validation of league identifiers entered during setup."""
import re
from typing import List, Dict, Optional

SLEEPER_LEAGUE_ID_PATTERN = re.compile(r'^\d{18,19}$')
ESPN_LEAGUE_ID_PATTERN = re.compile(r'^\d{1,12}$')
DEFAULT_MAX_ROSTERS = 12
EMPTY_SLOT_PLAYER_ID = "0"


def _result() -> Dict:
    return {'is_valid': True, 'errors': [], 'warnings': []}


def validate_sleeper_league_id(league_id: Optional[str]) -> Dict:
    """
    Sleeper league ids are 18-19 digit numeric strings.

    Returns dict with 'is_valid', 'errors' and 'warnings'.
    """
    result = _result()

    if not league_id or not str(league_id).strip():
        result['is_valid'] = False
        result['errors'].append('League ID is required')
        return result

    clean_id = str(league_id).strip()
    if not SLEEPER_LEAGUE_ID_PATTERN.match(clean_id):
        result['is_valid'] = False
        result['errors'].append(
            f'Invalid League ID format. Must be 18-19 digits. Provided: {clean_id} ({len(clean_id)} digits)'
        )

    return result


def validate_sleeper_roster_id(roster_id: Optional[str], max_rosters: int = DEFAULT_MAX_ROSTERS) -> Dict:
    """A missing roster id is only a warning; otherwise it must be 1..max_rosters."""
    result = _result()

    if roster_id is None or not str(roster_id).strip():
        result['warnings'].append('Roster ID not provided - will load league data only')
        return result

    try:
        roster_num = int(str(roster_id).strip())
    except ValueError:
        result['is_valid'] = False
        result['errors'].append('Roster ID must be a number')
        return result

    if roster_num < 1 or roster_num > max_rosters:
        result['is_valid'] = False
        result['errors'].append(f'Roster ID must be between 1 and {max_rosters}')

    return result


def validate_espn_league_id(league_id: Optional[str]) -> Dict:
    """ESPN league ids are short numeric strings."""
    result = _result()

    if not league_id or not str(league_id).strip():
        result['is_valid'] = False
        result['errors'].append('League ID is required')
        return result

    if not ESPN_LEAGUE_ID_PATTERN.match(str(league_id).strip()):
        result['is_valid'] = False
        result['errors'].append('Invalid ESPN League ID. Must be numeric.')

    return result


def validate_league_config(platform: str, league_id: Optional[str], roster_id: Optional[str] = None) -> Dict:
    """
    Validate a complete league setup.

    Args:
        platform: 'sleeper' or 'espn'
        league_id: League identifier as entered by the user
        roster_id: Optional roster/team id
    """
    platform = str(platform or '').strip().lower()

    if platform == 'sleeper':
        checks = [validate_sleeper_league_id(league_id)]
        if roster_id is not None and str(roster_id).strip():
            checks.append(validate_sleeper_roster_id(roster_id))
    elif platform == 'espn':
        checks = [validate_espn_league_id(league_id)]
    else:
        result = _result()
        result['is_valid'] = False
        result['errors'].append(f"Unsupported platform: {platform or 'none'}")
        return result

    return _merge(checks)


def is_empty_league(rosters: Optional[List[Dict]]) -> bool:
    """True when no roster holds a real player ("0" marks an empty slot)."""
    if not rosters:
        return True

    for roster in rosters:
        players = roster.get('players') or []
        if any(player_id != EMPTY_SLOT_PLAYER_ID for player_id in players):
            return False
    return True


def _merge(results: List[Dict]) -> Dict:
    merged = _result()
    for result in results:
        merged['errors'].extend(result['errors'])
        merged['warnings'].extend(result['warnings'])
        if not result['is_valid']:
            merged['is_valid'] = False
    return merged
