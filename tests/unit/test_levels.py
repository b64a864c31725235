"""Level computation — shared by server and client."""

from lerncasino.gamification.levels import XP_PER_LEVEL, level_for_xp, level_progress


class TestLevelForXp:
    def test_level_1_at_zero_xp(self):
        assert level_for_xp(0) == 1

    def test_boundary_99_xp(self):
        assert level_for_xp(99) == 1

    def test_level_2_at_100_xp(self):
        assert level_for_xp(100) == 2

    def test_level_11_at_1000_xp(self):
        assert level_for_xp(1000) == 11

    def test_negative_xp_clamped(self):
        assert level_for_xp(-50) == 1


class TestLevelProgress:
    def test_progress_within_level(self):
        assert level_progress(150) == 0.5

    def test_progress_resets_at_boundary(self):
        assert level_progress(XP_PER_LEVEL * 3) == 0.0
