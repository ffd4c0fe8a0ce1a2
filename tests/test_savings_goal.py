import unittest
from compute.savings_goal import (
    SavingsBand,
    compute_savings_goal,
    estimate_months_to_goal,
)


class TestSavingsGoal(unittest.TestCase):
    """Unit tests for savings goal progress."""

    def test_partial_progress(self):
        result = compute_savings_goal(300000, 1000000, 300000, 250000)

        self.assertAlmostEqual(result.ratio, 0.3)
        self.assertEqual(result.percent, 30)
        self.assertFalse(result.achieved)
        self.assertEqual(result.band, SavingsBand.AT_RISK)
        self.assertEqual(result.estimated_months, 14)

    def test_percent_tie_rounds_up(self):
        """Test 57 of 200 (28.5%) rounds to 29."""
        result = compute_savings_goal(57, 200, 0, 0)

        self.assertEqual(result.percent, 29)

    def test_percent_never_negative(self):
        self.assertEqual(compute_savings_goal(-50, 200, 0, 0).percent, 0)

    def test_ratio_is_capped(self):
        result = compute_savings_goal(1500000, 1000000, 300000, 200000)

        self.assertEqual(result.ratio, 1.0)
        self.assertEqual(result.percent, 100)
        self.assertTrue(result.achieved)
        self.assertEqual(result.band, SavingsBand.ACHIEVED)
        self.assertEqual(result.estimated_months, 0)

    def test_zero_target(self):
        result = compute_savings_goal(1000, 0, 300000, 200000)

        self.assertEqual(result.ratio, 0.0)
        self.assertEqual(result.percent, 0)

    def test_bands(self):
        self.assertEqual(
            compute_savings_goal(70, 100, 0, 0).band, SavingsBand.ON_TRACK
        )
        self.assertEqual(compute_savings_goal(40, 100, 0, 0).band, SavingsBand.BEHIND)
        self.assertEqual(compute_savings_goal(39, 100, 0, 0).band, SavingsBand.AT_RISK)

    def test_no_monthly_savings(self):
        self.assertIsNone(estimate_months_to_goal(0, 100000, 200000, 200000))
        self.assertIsNone(estimate_months_to_goal(0, 100000, 200000, 250000))

    def test_months_round_up(self):
        self.assertEqual(estimate_months_to_goal(0, 100001, 150000, 100000), 3)
        self.assertEqual(estimate_months_to_goal(0, 100000, 150000, 100000), 2)


if __name__ == "__main__":
    unittest.main()
