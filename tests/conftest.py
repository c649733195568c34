"""Pytest configuration and fixtures for tests."""
import pytest
from waiver_edge.models.player import Player, make_player_id
from waiver_edge.models.analysis import AnalysisWeights


def build_player(name, position, season_avg=10.0, weekly_scores=(), **kwargs):
    """Player with sensible defaults for every field not under test."""
    defaults = {
        'recent_avg': season_avg,
        'ownership': 50.0,
        'expert_rank': 50,
        'advanced_rank': 50,
        'target_share': 0.0,
        'snap_share': 0.0,
        'red_zone_shares': 0,
    }
    defaults.update(kwargs)
    return Player(
        player_id=make_player_id(name),
        name=name,
        position=position,
        season_avg=season_avg,
        weekly_scores=tuple(weekly_scores),
        **defaults
    )


@pytest.fixture
def make_player():
    """Factory fixture for building players."""
    return build_player


@pytest.fixture
def josh_allen():
    return build_player(
        "Josh Allen", "QB", 24.8,
        (22.4, 26.7, 23.1, 19.8, 25.5, 24.2, 28.4, 25.2, 26.2, 27.1),
        recent_avg=26.2, ownership=95.3, expert_rank=3, advanced_rank=2,
        snap_share=100.0, red_zone_shares=8
    )


@pytest.fixture
def christian_mccaffrey():
    return build_player(
        "Christian McCaffrey", "RB", 21.7,
        (18.2, 24.7, 21.3, 16.8, 19.5, 20.2, 17.4, 19.2, 18.9, 18.1),
        recent_avg=18.9, ownership=98.7, expert_rank=1, advanced_rank=4,
        target_share=0.12, snap_share=82.1, red_zone_shares=6
    )


@pytest.fixture
def jaylen_warren():
    return build_player(
        "Jaylen Warren", "RB", 9.8,
        (11.2, 8.4, 9.7, 10.1, 8.9, 9.5, 11.8, 10.9, 11.4, 11.1),
        recent_avg=11.2, ownership=15.8, expert_rank=35, advanced_rank=29,
        target_share=0.08, snap_share=38.7, red_zone_shares=2
    )


@pytest.fixture
def darnell_mooney():
    return build_player(
        "Darnell Mooney", "WR", 11.1,
        (9.8, 12.4, 10.7, 11.5, 9.9, 11.8, 13.8, 12.7, 13.1, 13.1),
        recent_avg=13.2, ownership=22.4, expert_rank=38, advanced_rank=25,
        target_share=0.22, snap_share=89.3, red_zone_shares=1
    )


@pytest.fixture
def tucker_kraft():
    return build_player(
        "Tucker Kraft", "TE", 7.2,
        (5.4, 8.9, 6.7, 7.8, 6.2, 7.5, 9.1, 9.8, 10.2, 9.5),
        recent_avg=9.8, ownership=5.2, expert_rank=18, advanced_rank=12,
        target_share=0.12, snap_share=68.4, red_zone_shares=4
    )


@pytest.fixture
def te_hole_roster(josh_allen, christian_mccaffrey, jaylen_warren, darnell_mooney):
    """1 QB / 2 RB / 1 WR / 0 TE."""
    return [josh_allen, christian_mccaffrey, jaylen_warren, darnell_mooney]


@pytest.fixture
def fill_holes_weights():
    return AnalysisWeights(roster_balance=20, risk=50)
