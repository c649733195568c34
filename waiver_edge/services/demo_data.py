"""Static demo league used when live league data is unavailable."""
from typing import Dict, List
from waiver_edge.models.player import Player


_DEMO_AVAILABLE = [
    {
        'name': "Gus Edwards", 'position': "RB", 'team': "BAL",
        'season_avg': 12.4, 'recent_avg': 15.8,
        'weekly_scores': (8.2, 14.7, 11.3, 9.8, 13.5, 14.2, 16.4, 15.2, 15.8, 16.1),
        'ownership': 12.3, 'expert_rank': 28, 'advanced_rank': 18,
        'target_share': 0.0, 'snap_share': 45.2, 'red_zone_shares': 3,
    },
    {
        'name': "Romeo Doubs", 'position': "WR", 'team': "GB",
        'season_avg': 8.9, 'recent_avg': 12.4,
        'weekly_scores': (6.2, 4.8, 11.3, 7.5, 9.8, 8.1, 12.8, 11.9, 12.4, 12.5),
        'ownership': 8.7, 'expert_rank': 45, 'advanced_rank': 32,
        'target_share': 0.18, 'snap_share': 72.1, 'red_zone_shares': 2,
    },
    {
        'name': "Tucker Kraft", 'position': "TE", 'team': "GB",
        'season_avg': 7.2, 'recent_avg': 9.8,
        'weekly_scores': (5.4, 8.9, 6.7, 7.8, 6.2, 7.5, 9.1, 9.8, 10.2, 9.5),
        'ownership': 5.2, 'expert_rank': 18, 'advanced_rank': 12,
        'target_share': 0.12, 'snap_share': 68.4, 'red_zone_shares': 4,
    },
    {
        'name': "Jaylen Warren", 'position': "RB", 'team': "PIT",
        'season_avg': 9.8, 'recent_avg': 11.2,
        'weekly_scores': (11.2, 8.4, 9.7, 10.1, 8.9, 9.5, 11.8, 10.9, 11.4, 11.1),
        'ownership': 15.8, 'expert_rank': 35, 'advanced_rank': 29,
        'target_share': 0.08, 'snap_share': 38.7, 'red_zone_shares': 2,
    },
    {
        'name': "Darnell Mooney", 'position': "WR", 'team': "ATL",
        'season_avg': 11.1, 'recent_avg': 13.2,
        'weekly_scores': (9.8, 12.4, 10.7, 11.5, 9.9, 11.8, 13.8, 12.7, 13.1, 13.1),
        'ownership': 22.4, 'expert_rank': 38, 'advanced_rank': 25,
        'target_share': 0.22, 'snap_share': 89.3, 'red_zone_shares': 1,
    },
    {
        'name': "Chuba Hubbard", 'position': "RB", 'team': "CAR",
        'season_avg': 10.5, 'recent_avg': 14.3,
        'weekly_scores': (7.8, 9.2, 11.4, 8.9, 12.7, 13.1, 15.8, 13.9, 14.2, 14.8),
        'ownership': 18.6, 'expert_rank': 42, 'advanced_rank': 31,
        'target_share': 0.05, 'snap_share': 52.3, 'red_zone_shares': 3,
    },
    {
        'name': "Quentin Johnston", 'position': "WR", 'team': "LAC",
        'season_avg': 6.8, 'recent_avg': 10.2,
        'weekly_scores': (4.2, 5.8, 6.1, 8.9, 7.2, 8.5, 10.8, 9.6, 10.2, 10.5),
        'ownership': 3.7, 'expert_rank': 62, 'advanced_rank': 41,
        'target_share': 0.15, 'snap_share': 65.4, 'red_zone_shares': 2,
    },
    {
        'name': "Jalen Tolbert", 'position': "WR", 'team': "DAL",
        'season_avg': 8.3, 'recent_avg': 11.8,
        'weekly_scores': (5.9, 7.2, 8.8, 6.4, 9.1, 10.2, 12.4, 11.1, 11.8, 12.0),
        'ownership': 9.2, 'expert_rank': 51, 'advanced_rank': 38,
        'target_share': 0.19, 'snap_share': 78.6, 'red_zone_shares': 1,
    },
]

_DEMO_ROSTER = [
    {
        'name': "Josh Allen", 'position': "QB", 'team': "BUF",
        'season_avg': 24.8, 'recent_avg': 26.2,
        'weekly_scores': (22.4, 26.7, 23.1, 19.8, 25.5, 24.2, 28.4, 25.2, 26.2, 27.1),
        'ownership': 95.3, 'expert_rank': 3, 'advanced_rank': 2,
        'target_share': 0.0, 'snap_share': 100.0, 'red_zone_shares': 8,
    },
    {
        'name': "Christian McCaffrey", 'position': "RB", 'team': "SF",
        'season_avg': 21.7, 'recent_avg': 18.9,
        'weekly_scores': (18.2, 24.7, 21.3, 16.8, 19.5, 20.2, 17.4, 19.2, 18.9, 18.1),
        'ownership': 98.7, 'expert_rank': 1, 'advanced_rank': 4,
        'target_share': 0.12, 'snap_share': 82.1, 'red_zone_shares': 6,
    },
]


def get_demo_league() -> Dict[str, List[Player]]:
    """
    Build the demo league.

    Returns dict with:
    - available_players: waiver-wire candidates
    - my_roster: the demo user's roster
    """
    return {
        'available_players': [Player.from_dict(record) for record in _DEMO_AVAILABLE],
        'my_roster': [Player.from_dict(record) for record in _DEMO_ROSTER],
    }
