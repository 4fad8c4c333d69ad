"""Tests for playback state variants."""

import unittest

from voicetrack.playback.state import (
    IDLE,
    Error,
    Idle,
    Paused,
    Playing,
    Recording,
    StateKind,
    is_active,
    percentage_of,
    playback_time_of,
)


class TestStateVariants(unittest.TestCase):
    """Test cases for the state dataclasses."""

    def test_kinds(self):
        """Every variant reports its tag."""
        self.assertEqual(IDLE.kind, StateKind.IDLE)
        self.assertEqual(Error(None).kind, StateKind.ERROR)
        self.assertEqual(Playing(0, 0.0).kind, StateKind.PLAYING)
        self.assertEqual(Paused(0, 0.0).kind, StateKind.PAUSED)
        self.assertEqual(Recording().kind, StateKind.RECORDING)

    def test_idle_instances_are_equal(self):
        self.assertEqual(Idle(), IDLE)

    def test_position_is_normalized(self):
        """Times become int and percentages float."""
        state = Playing(1000.0, 1)

        self.assertIsInstance(state.playback_time, int)
        self.assertIsInstance(state.percentage, float)
        self.assertEqual(state, Playing(1000, 1.0))

    def test_recording_amplitudes_are_a_tuple(self):
        """Amplitude lists are stored as an immutable tuple."""
        samples = [1, 2, 3]
        state = Recording(samples)
        samples.append(4)

        self.assertEqual(state.amplitudes, (1, 2, 3))
        self.assertEqual(state, Recording((1, 2, 3)))

    def test_playing_and_paused_differ(self):
        """Same position in different variants is not equal."""
        self.assertNotEqual(Playing(10, 0.5), Paused(10, 0.5))

    def test_states_are_frozen(self):
        """States cannot be modified after creation."""
        state = Playing(10, 0.5)

        with self.assertRaises(AttributeError):
            state.playback_time = 20


class TestStateHelpers(unittest.TestCase):
    """Test cases for the variant helpers."""

    def test_position_helpers(self):
        """Only Playing and Paused carry a position."""
        self.assertEqual(playback_time_of(Playing(100, 0.1)), 100)
        self.assertEqual(percentage_of(Paused(200, 0.2)), 0.2)

        for state in (None, IDLE, Error("x"), Recording([1])):
            self.assertIsNone(playback_time_of(state))
            self.assertIsNone(percentage_of(state))

    def test_is_active(self):
        """Playing and Recording are active, the rest are not."""
        self.assertTrue(is_active(Playing(0, 0.0)))
        self.assertTrue(is_active(Recording()))

        for state in (None, IDLE, Error("x"), Paused(0, 0.0)):
            self.assertFalse(is_active(state))

    def test_unknown_state_raises(self):
        """Objects that are not a state are rejected."""
        for helper in (playback_time_of, percentage_of, is_active):
            with self.assertRaises(TypeError):
                helper("playing")


if __name__ == "__main__":
    unittest.main()
