import pytest

from fuzzynet.fuzzifiers import (
    BellFuzzifier,
    Fuzzifier,
    PiBellFuzzifier,
    PiFuzzifier,
    SingletonFuzzifier,
    TriangleFuzzifier,
)
from fuzzynet.sets import TriangleSet


def test_move_to_shifts_support_and_keeps_width():
    for fuzzifier in [
        TriangleFuzzifier(0.0, 0.1, 0.1),
        PiFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        BellFuzzifier(0.0, 0.2, 0.3),
        PiBellFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        SingletonFuzzifier(1.0, 0.01),
    ]:
        width = fuzzifier.maximum - fuzzifier.minimum
        old_min = fuzzifier.minimum
        old_center = fuzzifier.center
        fuzzifier.move_to(old_center + 2.5)
        assert fuzzifier.center == old_center + 2.5
        assert fuzzifier.minimum == pytest.approx(old_min + 2.5)
        assert fuzzifier.maximum - fuzzifier.minimum == pytest.approx(width)


def test_membership_is_full_at_the_moved_center():
    for fuzzifier in [
        TriangleFuzzifier(0.0, 0.1, 0.1),
        PiFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        BellFuzzifier(0.0, 0.2, 0.3),
        PiBellFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        SingletonFuzzifier(1.0, 0.01),
    ]:
        fuzzifier.move_to(-4.0)
        assert fuzzifier.membership(-4.0) == 1.0
        assert fuzzifier.membership(-10.0) == 0.0
        assert fuzzifier.membership(10.0) == 0.0


def test_set_points_sets_spacing():
    for fuzzifier in [
        TriangleFuzzifier(0.0, 0.1, 0.1),
        PiFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        BellFuzzifier(0.0, 0.2, 0.3),
        PiBellFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        SingletonFuzzifier(1.0, 0.01),
    ]:
        fuzzifier.set_points(4)
        assert fuzzifier.points == 4
        assert fuzzifier.interval * 5 == pytest.approx(
            fuzzifier.maximum - fuzzifier.minimum
        )


def test_set_points_clamps_to_one():
    for fuzzifier in [
        TriangleFuzzifier(0.0, 0.1, 0.1),
        PiFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        BellFuzzifier(0.0, 0.2, 0.3),
        PiBellFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        SingletonFuzzifier(1.0, 0.01),
    ]:
        fuzzifier.set_points(0)
        assert fuzzifier.points == 1
        fuzzifier.set_points(-3)
        assert fuzzifier.points == 1
        assert fuzzifier.interval * 2 == pytest.approx(
            fuzzifier.maximum - fuzzifier.minimum
        )


def test_spacing_is_computed_on_creation():
    for fuzzifier in [
        TriangleFuzzifier(0.0, 0.1, 0.1),
        PiFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        BellFuzzifier(0.0, 0.2, 0.3),
        PiBellFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        SingletonFuzzifier(1.0, 0.01),
    ]:
        assert fuzzifier.points == 1
        assert fuzzifier.interval * 2 == pytest.approx(
            fuzzifier.maximum - fuzzifier.minimum
        )


def test_height_center_is_zero():
    for fuzzifier in [
        TriangleFuzzifier(0.0, 0.1, 0.1),
        PiFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        BellFuzzifier(0.0, 0.2, 0.3),
        PiBellFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        SingletonFuzzifier(1.0, 0.01),
    ]:
        fuzzifier.move_to(3.0)
        assert fuzzifier.height_center() == 0.0


def test_set_width_keeps_midpoint_and_updates_spacing():
    for fuzzifier in [
        TriangleFuzzifier(0.0, 0.1, 0.1),
        PiFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        BellFuzzifier(0.0, 0.2, 0.3),
        PiBellFuzzifier(0.0, 0.4, 0.1, 0.1, 0.4),
        SingletonFuzzifier(1.0, 0.01),
    ]:
        middle = (fuzzifier.minimum + fuzzifier.maximum) / 2
        fuzzifier.set_points(3)
        fuzzifier.set_width(2.0)
        assert fuzzifier.maximum - fuzzifier.minimum == pytest.approx(2.0)
        assert (fuzzifier.minimum + fuzzifier.maximum) / 2 == pytest.approx(middle)
        assert fuzzifier.interval * 4 == pytest.approx(2.0)


def test_set_width_is_undone_by_move_to_for_triangle():
    fuzzifier = TriangleFuzzifier(0.0, 0.1, 0.1)
    fuzzifier.set_width(2.0)
    fuzzifier.move_to(0.0)
    assert fuzzifier.minimum == pytest.approx(-0.1)
    assert fuzzifier.maximum == pytest.approx(0.1)


def test_triangle_fuzzifier_shape_matches_triangle_set():
    fuzzifier = TriangleFuzzifier(0.5, 0.25, 0.75)
    reference = TriangleSet(0.25, 0.5, 1.25)
    assert fuzzifier.key_points() == reference.key_points()
    for x in (0.0, 0.3, 0.5, 0.8, 1.2, 2.0):
        assert fuzzifier.membership(x) == pytest.approx(reference.membership(x))


def test_pi_fuzzifier_key_points_follow_offsets():
    fuzzifier = PiFuzzifier(1.0, 0.4, 0.1, 0.2, 0.5)
    fuzzifier.move_to(2.0)
    assert fuzzifier.key_points() == pytest.approx([1.6, 1.9, 2.2, 2.5])


def test_singleton_fuzzifier_keeps_delta_when_moved():
    fuzzifier = SingletonFuzzifier(1.0, 0.01)
    fuzzifier.move_to(-1.0)
    assert fuzzifier.maximum - fuzzifier.minimum == pytest.approx(0.01)
    assert fuzzifier.center == -1.0
    assert fuzzifier.membership(-1.0) == 1.0


def test_fuzzifier_base_is_abstract():
    with pytest.raises(TypeError):
        Fuzzifier()