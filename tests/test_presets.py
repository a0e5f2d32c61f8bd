"""Tests for the in-memory preset library and range recorder."""

from texttyper.events import AnimationKind, AnimationRange
from texttyper.presets import PresetLibrary, RangeRecorder
from texttyper.protocols import AnimationRangeSink, PresetLookup


class TestPresetLibrary:
    def test_lookup(self) -> None:
        library = PresetLibrary(shake=["lightrot"], curve=["bounce"])

        assert library.contains_shake_preset("lightrot") is True
        assert library.contains_shake_preset("bounce") is False
        assert library.contains_curve_preset("bounce") is True

    def test_names_are_case_sensitive(self) -> None:
        library = PresetLibrary(shake=["LightRot"])
        assert library.contains_shake_preset("lightrot") is False

    def test_kind_of(self) -> None:
        library = PresetLibrary(shake=["a", "both"], curve=["b", "both"])

        assert library.kind_of("a") is AnimationKind.SHAKE
        assert library.kind_of("b") is AnimationKind.CURVE
        assert library.kind_of("both") is AnimationKind.SHAKE
        assert library.kind_of("c") is None

    def test_from_dict(self) -> None:
        library = PresetLibrary.from_dict({"shake": ["fullshake"], "curve": ["crazyflip"]})

        assert library.shake_presets == frozenset({"fullshake"})
        assert library.curve_presets == frozenset({"crazyflip"})

    def test_from_dict_missing_keys(self) -> None:
        library = PresetLibrary.from_dict({})
        assert library.shake_presets == frozenset()
        assert library.curve_presets == frozenset()

    def test_conforms_to_protocol(self) -> None:
        assert isinstance(PresetLibrary(), PresetLookup)


class TestRangeRecorder:
    def test_register_and_clear(self) -> None:
        recorder = RangeRecorder()
        shake = AnimationRange(0, 1, "s", AnimationKind.SHAKE)
        curve = AnimationRange(2, 5, "c", AnimationKind.CURVE)

        recorder.register_range(shake)
        recorder.register_range(curve)

        assert recorder.ranges == (shake, curve)
        assert recorder.shake_ranges == (shake,)
        assert recorder.curve_ranges == (curve,)
        assert len(recorder) == 2
        assert list(recorder) == [shake, curve]

        recorder.clear_all()
        assert recorder.ranges == ()
        assert recorder.clear_count == 1

    def test_conforms_to_protocol(self) -> None:
        assert isinstance(RangeRecorder(), AnimationRangeSink)


class TestAnimationRange:
    def test_contains(self) -> None:
        animation_range = AnimationRange(2, 4, "s", AnimationKind.SHAKE)

        assert animation_range.contains(2)
        assert animation_range.contains(4)
        assert not animation_range.contains(5)
        assert len(animation_range) == 3
