"""
Tests for roster composition analysis.
"""

import pytest
from waiver_edge.services.roster_analyzer import RosterAnalyzer, analyze_roster


class TestRosterAnalyzer:
    """Test suite for positional strength and needs."""

    @pytest.fixture
    def analyzer(self):
        return RosterAnalyzer()

    def test_empty_roster_reports_every_skill_position(self, analyzer):
        analysis = analyzer.analyze_roster([])

        assert [a.position for a in analysis] == ['QB', 'RB', 'WR', 'TE']
        for group in analysis:
            assert group.depth == 0
            assert group.avg_score == 0.0
            assert group.top_score == 0.0
            assert group.strength == 0.0
            assert group.risk_profile == 'balanced'

    def test_missing_position_still_present(self, analyzer, te_hole_roster):
        analysis = {a.position: a for a in analyzer.analyze_roster(te_hole_roster)}

        assert analysis['TE'].depth == 0
        assert analysis['TE'].strength == 0.0
        assert analysis['RB'].depth == 2
        assert analysis['QB'].depth == 1
        assert analysis['WR'].depth == 1

    def test_strength_formula(self, analyzer, josh_allen):
        """0.4 * top + 0.3 * avg floor + 0.2 * avg + 2 * depth."""
        qb = analyzer.analyze_roster([josh_allen])[0]

        # Allen's ascending scores put 22.4 at the 10th percentile index
        assert qb.avg_floor == pytest.approx(22.4)
        assert qb.strength == pytest.approx(0.4 * 24.8 + 0.3 * 22.4 + 0.2 * 24.8 + 2 * 1)

    def test_group_averages(self, analyzer, christian_mccaffrey, jaylen_warren):
        rb = analyze_roster([christian_mccaffrey, jaylen_warren])[1]

        assert rb.position == 'RB'
        assert rb.depth == 2
        assert rb.top_score == pytest.approx(21.7)
        assert rb.avg_score == pytest.approx((21.7 + 9.8) / 2)
        assert rb.avg_floor == pytest.approx((17.4 + 8.9) / 2)

    def test_missing_season_average_counts_as_zero(self, analyzer, make_player, christian_mccaffrey):
        unknown = make_player("Unknown RB", "RB", None, [])
        rb = analyzer.analyze_roster([christian_mccaffrey, unknown])[1]

        assert rb.depth == 2
        assert rb.top_score == pytest.approx(21.7)
        assert rb.avg_score == pytest.approx(21.7 / 2)
        assert rb.avg_floor == pytest.approx(17.4 / 2)

    def test_depth_rewarded_independent_of_quality(self, analyzer, make_player):
        one = analyzer.analyze_roster([make_player("A", "WR", 0.0, [])])[2]
        two = analyzer.analyze_roster([make_player("A", "WR", 0.0, []), make_player("B", "WR", 0.0, [])])[2]

        assert one.strength == pytest.approx(2.0)
        assert two.strength == pytest.approx(4.0)

    def test_kickers_and_defenses_excluded(self, analyzer, make_player):
        roster = [make_player("Kicker", "K", 9.0, [9.0]), make_player("Defense", "DEF", 8.0, [8.0])]
        analysis = analyzer.analyze_roster(roster)

        assert len(analysis) == 4
        assert all(a.strength == 0.0 for a in analysis)

    def test_risk_profiles(self, analyzer, make_player):
        steady = make_player("Steady", "TE", 5.0, [5.0, 5.0, 5.0, 5.0])
        boom_bust = make_player("Boom Bust", "WR", 8.0, [1.0, 15.0, 2.0, 14.0])
        analysis = {a.position: a for a in analyzer.analyze_roster([steady, boom_bust])}

        assert analysis['TE'].risk_profile == 'safe'
        assert analysis['WR'].risk_profile == 'volatile'

    def test_bye_weeks_counted(self, analyzer, make_player):
        roster = [
            make_player("RB One", "RB", bye_week=7),
            make_player("RB Two", "RB", bye_week=7),
            make_player("RB Three", "RB", bye_week=9),
            make_player("RB Four", "RB"),
        ]
        rb = analyzer.analyze_roster(roster)[1]

        assert rb.bye_weeks == {7: 2, 9: 1}

    def test_position_needs(self, analyzer, te_hole_roster, make_player):
        needs = analyzer.get_position_needs(te_hole_roster)

        assert set(needs) == {'QB', 'RB', 'WR', 'TE', 'K', 'DEF'}
        assert needs['TE'] is True
        assert needs['QB'] is True  # 1 of 2

        full_qb = te_hole_roster + [make_player("Backup QB", "QB")]
        assert analyzer.get_position_needs(full_qb)['QB'] is False

    def test_custom_target_depth(self, make_player):
        analyzer = RosterAnalyzer(target_depth={'QB': 1})
        roster = [make_player("Starter", "QB")]

        assert analyzer.get_position_needs(roster)['QB'] is False
        assert analyzer.analyze_roster(roster)[0].needs_player is False

    def test_position_counts(self, analyzer, te_hole_roster):
        counts = analyzer.get_position_counts(te_hole_roster)

        assert counts == {'QB': 1, 'RB': 2, 'WR': 1, 'TE': 0, 'K': 0, 'DEF': 0}
