"""
Tests for player data cleaning.
"""

import pytest
from waiver_edge.models.player import Player
from waiver_edge.services.data_cleaner import DataCleaner, normalize_position


class TestDataCleaner:
    """Test suite for DataCleaner."""

    @pytest.fixture
    def cleaner(self):
        return DataCleaner()

    def test_clean_players_pass_through(self, cleaner, tucker_kraft, josh_allen):
        result = cleaner.clean_and_validate_players([tucker_kraft, josh_allen])

        assert result['cleaned_players'] == [tucker_kraft, josh_allen]
        assert result['issues'] == []
        assert result['statistics']['players_with_complete_data'] == 2

    def test_duplicates_removed(self, cleaner, tucker_kraft):
        result = cleaner.clean_and_validate_players([tucker_kraft, tucker_kraft])

        assert len(result['cleaned_players']) == 1
        assert result['statistics']['duplicates_found'] == 1
        assert result['issues'][0]['type'] == 'duplicate'
        assert result['issues'][0]['severity'] == 'warning'

    def test_excluded_ids_skipped(self, cleaner, tucker_kraft, josh_allen):
        result = cleaner.clean_and_validate_players(
            [tucker_kraft, josh_allen], exclude_ids={'josh_allen'}
        )

        assert result['cleaned_players'] == [tucker_kraft]
        assert result['statistics']['excluded'] == 1

    def test_invalid_position_dropped(self, cleaner, make_player):
        result = cleaner.clean_and_validate_players([make_player("Mystery", "LB")])

        assert result['cleaned_players'] == []
        assert result['statistics']['players_with_invalid_data'] == 1
        assert result['issues'][0]['type'] == 'invalid_position'
        assert result['issues'][0]['severity'] == 'error'

    def test_missing_name_dropped(self, cleaner):
        result = cleaner.clean_and_validate_players([Player(player_id='p1', name='  ', position='WR')])

        assert result['cleaned_players'] == []
        assert result['issues'][0]['type'] == 'missing_name'

    def test_position_aliases(self, cleaner, make_player):
        result = cleaner.clean_and_validate_players([
            make_player("Steelers", "D/ST"),
            make_player("Tucker", "pk"),
            make_player("Lamb", "wr"),
        ])

        assert [p.position for p in result['cleaned_players']] == ['DEF', 'K', 'WR']

    def test_out_of_range_values_clamped(self, cleaner, make_player):
        player = make_player("Bad Feed", "WR", ownership=140.0, snap_share=-5.0,
                             target_share=1.8, expert_rank=0)

        result = cleaner.clean_and_validate_players([player])
        cleaned = result['cleaned_players'][0]

        assert cleaned.ownership == 100.0
        assert cleaned.snap_share == 0.0
        assert cleaned.target_share == 1.0
        assert cleaned.expert_rank == 1
        assert result['statistics']['players_clamped'] == 1
        assert len(result['issues']) == 4
        assert all(i['type'] == 'out_of_range' for i in result['issues'])
        assert "Bad Feed ownership 140.0 clamped to 100.0" in [i['message'] for i in result['issues']]

    def test_missing_numbers_get_defaults(self, cleaner):
        player = Player(player_id='p1', name='Sparse', position='RB',
                        season_avg=None, ownership=None, expert_rank=None, red_zone_shares='3')

        cleaned, issues = cleaner.clean_player(player)

        assert cleaned.season_avg == 0.0
        assert cleaned.ownership == 0.0
        assert cleaned.expert_rank == 999
        assert cleaned.red_zone_shares == 3
        assert issues == []

    def test_unusable_weekly_scores_removed(self, cleaner, make_player):
        player = make_player("Gaps", "WR", weekly_scores=[8.0, None, 'bye', float('nan'), 12.0])

        cleaned, issues = cleaner.clean_player(player)

        assert cleaned.weekly_scores == (8.0, 12.0)
        assert issues[0]['type'] == 'invalid_weekly_score'

    def test_bye_week_out_of_range(self, cleaner, make_player):
        cleaned, issues = cleaner.clean_player(make_player("Late Bye", "TE", bye_week=22))

        assert cleaned.bye_week is None
        assert len(issues) == 1

    def test_bye_week_string(self, cleaner, make_player):
        cleaned, issues = cleaner.clean_player(make_player("String Bye", "TE", bye_week='9'))

        assert cleaned.bye_week == 9
        assert issues == []

    @pytest.mark.parametrize("raw,expected", [
        ('DST', 'DEF'),
        ('D', 'DEF'),
        (' te ', 'TE'),
        (None, ''),
        ('', ''),
    ])
    def test_normalize_position(self, raw, expected):
        assert normalize_position(raw) == expected
