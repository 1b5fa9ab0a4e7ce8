"""Tests for the input buffer and pointer normalization."""
import pytest

from relining.controls import InputBuffer, pointer_vector
from relining.types import ControlFrame


class TestPointerVector:
    """Test cases for pointer_vector normalization."""

    def test_inside_radius_scales_linearly(self):
        """Offsets inside the stick radius scale linearly to the unit disc."""
        assert pointer_vector(25.0, -50.0, 100.0) == pytest.approx((0.25, -0.5))

    def test_clamped_to_unit_disc(self):
        """Offsets past the stick radius are clamped to length one."""
        v = pointer_vector(300.0, 400.0, 100.0)
        assert v == pytest.approx((0.6, 0.8))

    def test_zero_radius_gives_zero(self):
        """A zero stick radius yields the zero vector."""
        assert pointer_vector(10.0, 10.0, 0.0) == (0.0, 0.0)


class TestInputBuffer:
    """Test cases for InputBuffer key and pointer handling."""

    def test_idle_frame(self):
        """A fresh buffer produces a still frame with no action."""
        assert InputBuffer().frame() == ControlFrame(vector=(0.0, 0.0), action=False)

    @pytest.mark.parametrize("key,vector", [
        ("w", (0.0, -1.0)),
        ("up", (0.0, -1.0)),
        ("s", (0.0, 1.0)),
        ("down", (0.0, 1.0)),
        ("a", (-1.0, 0.0)),
        ("left", (-1.0, 0.0)),
        ("d", (1.0, 0.0)),
        ("right", (1.0, 0.0)),
    ])
    def test_direction_keys(self, key, vector):
        """Each direction key maps to its unit axis."""
        buf = InputBuffer()
        buf.press(key)
        assert buf.frame().vector == vector

    def test_opposite_keys_cancel(self):
        """Holding opposite keys cancels out on that axis."""
        buf = InputBuffer()
        buf.press("w")
        buf.press("s")
        assert buf.frame().vector == (0.0, 0.0)

    def test_diagonal_is_not_normalized(self):
        """Two direction keys sum to an unnormalized diagonal."""
        buf = InputBuffer()
        buf.press("w")
        buf.press("d")
        assert buf.frame().vector == (1.0, -1.0)

    def test_key_names_are_case_insensitive(self):
        """Key names match regardless of case."""
        buf = InputBuffer()
        buf.press("W")
        assert buf.is_held("w")
        buf.release("w")
        assert not buf.is_held("W")

    def test_keyboard_and_pointer_are_summed(self):
        """Keyboard and pointer vectors add together."""
        buf = InputBuffer()
        buf.press("d")
        buf.set_pointer(50.0, 0.0, 50.0)
        assert buf.frame().vector == pytest.approx((2.0, 0.0))

    def test_release_pointer(self):
        """Releasing the pointer drops its contribution."""
        buf = InputBuffer()
        buf.set_pointer(0.3, 0.4)
        assert buf.frame().vector == pytest.approx((0.3, 0.4))
        buf.release_pointer()
        assert buf.frame().vector == (0.0, 0.0)

    def test_action_from_space_or_button(self):
        """Action is held by the space key or the action button."""
        buf = InputBuffer()
        buf.press("space")
        assert buf.frame().action
        buf.release("space")
        assert not buf.frame().action
        buf.set_action(True)
        assert buf.frame().action

    def test_clear(self):
        """clear() drops keys, pointer and action."""
        buf = InputBuffer()
        buf.press("a")
        buf.press("space")
        buf.set_pointer(1.0, 0.0)
        buf.set_action(True)
        buf.clear()
        assert buf.frame() == ControlFrame()
