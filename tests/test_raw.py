"""
Unit tests for the raw integer engine.
Times are plain nanoseconds; no time library involved.
"""
import unittest
import decimal
from gcra.raw import generate_raw, compute_raw, RawOutcome

SECOND = 1_000_000_000
MS = 1_000_000
NOW = 1_642_935_120 * SECOND

class TestGenerateRaw(unittest.TestCase):
    def test_tat_offset(self):
        # emission interval 100ms, 25 of 50 tokens left
        self.assertEqual(generate_raw(NOW, 25, 50, 10, SECOND), NOW + 2_500 * MS)

    def test_full_and_empty(self):
        self.assertEqual(generate_raw(NOW, 0, 50, 10, SECOND), NOW + 5 * SECOND)
        self.assertEqual(generate_raw(NOW, 50, 50, 10, SECOND), NOW)

    def test_rounded_emission_interval(self):
        # 1s / 3 = 333333333.33ns
        self.assertEqual(generate_raw(0, 0, 3, 3, SECOND), 999_999_999)

class TestComputeRaw(unittest.TestCase):
    def test_allowed(self):
        tat = generate_raw(NOW, 25, 50, 10, SECOND)
        outcome = compute_raw(tat, NOW, 50, 10, SECOND, 10)
        self.assertEqual(outcome, RawOutcome(
            tat=NOW + 3_500 * MS, limited=False, remaining=15, retry_in=0, reset_in=3_500 * MS
        ))

    def test_denied_recomputes_remaining(self):
        tat = NOW + 3_500 * MS
        outcome = compute_raw(tat, NOW, 50, 10, SECOND, 30)
        self.assertTrue(outcome.limited)
        self.assertEqual(outcome.tat, tat)
        self.assertEqual(outcome.remaining, 15)
        self.assertEqual(outcome.retry_in, 1_500 * MS)
        self.assertEqual(outcome.reset_in, 3_500 * MS)

    def test_empty_query_is_limited(self):
        tat = NOW + 5 * SECOND
        outcome = compute_raw(tat, NOW, 50, 10, SECOND, 0)
        self.assertEqual(outcome, RawOutcome(
            tat=tat, limited=True, remaining=0, retry_in=0, reset_in=5 * SECOND
        ))

    def test_last_token_is_allowed(self):
        tat = NOW + 3_500 * MS
        outcome = compute_raw(tat, NOW, 50, 10, SECOND, 15)
        self.assertFalse(outcome.limited)
        self.assertEqual(outcome.remaining, 0)
        self.assertEqual(outcome.tat, NOW + 5 * SECOND)

    def test_stale_tat_is_clamped(self):
        # idle for an hour: never more than burst available
        outcome = compute_raw(NOW - 3_600 * SECOND, NOW, 50, 10, SECOND, 0)
        self.assertEqual(outcome, RawOutcome(
            tat=NOW, limited=False, remaining=50, retry_in=0, reset_in=0
        ))

    def test_stale_tat_zero(self):
        outcome = compute_raw(0, NOW, 4, 10, 10 * SECOND, 1)
        self.assertEqual(outcome, RawOutcome(
            tat=NOW + SECOND, limited=False, remaining=3, retry_in=0, reset_in=SECOND
        ))

    def test_remaining_rounds_to_nearest(self):
        # emission interval 1s, 1.5 tokens regenerated since empty
        tat = NOW + 2_500 * MS
        outcome = compute_raw(tat, NOW, 4, 1, SECOND, 0)
        self.assertEqual(outcome.remaining, 2)
        self.assertFalse(outcome.limited)

    def test_zero_emission_interval(self):
        with self.assertRaises(decimal.DivisionByZero):
            compute_raw(0, NOW, 1, 3, 1, 1)

if __name__ == '__main__':
    unittest.main()
