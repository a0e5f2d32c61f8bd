"""Tests for timeline computation: delays, overrides and animation ranges."""

import logging

import pytest

from texttyper import build_timeline
from texttyper.config import TyperConfig
from texttyper.events import AnimationKind, AnimationRange
from texttyper.presets import PresetLibrary
from texttyper.symbols import strip_tags, tokenize
from texttyper.timeline import Timeline, resolve_animation_kind, speed_to_delay

PRESETS = PresetLibrary(
    shake=["shake", "lightrot", "lightpos", "fullshake"],
    curve=["slowsine", "bounce", "crazyflip"],
)


def delays(text: str, base: float = 0.1, **kwargs: object) -> list[float]:
    timeline = Timeline()
    timeline.rebuild(tokenize(text), base, **kwargs)  # type: ignore[arg-type]
    return timeline.delays


class TestBaseDelays:
    def test_plain_text_uses_base_delay(self) -> None:
        assert delays("abc") == pytest.approx([0.1, 0.1, 0.1])

    def test_empty_text(self) -> None:
        assert delays("") == []

    def test_punctuation_multiplier(self) -> None:
        assert delays("Hi!", punctuation_multiplier=8.0) == pytest.approx([0.1, 0.1, 0.8])

    def test_custom_punctuation_set(self) -> None:
        result = delays("a;b.", punctuations=frozenset(";"), punctuation_multiplier=2.0)
        assert result == pytest.approx([0.1, 0.2, 0.1, 0.1])

    def test_renderer_tags_do_not_affect_timing(self) -> None:
        assert delays("<b>a</b><color=red>b</color>") == pytest.approx([0.1, 0.1])


class TestDelayTag:
    def test_delay_override(self) -> None:
        assert delays("A<delay=0.5>B</delay>C") == pytest.approx([0.1, 0.5, 0.1])

    def test_delay_runs_to_end_without_close(self) -> None:
        assert delays("A<delay=0.5>BC") == pytest.approx([0.1, 0.5, 0.5])

    def test_delay_compounds_with_punctuation(self) -> None:
        result = delays("<delay=0.5>a.</delay>", punctuation_multiplier=8.0)
        assert result == pytest.approx([0.5, 4.0])

    def test_invalid_delay_falls_back_to_base(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="texttyper"):
            result = delays("A<delay=slow>B</delay>")

        assert result == pytest.approx([0.1, 0.1])
        assert "slow" in caplog.text

    def test_negative_delay_clamped(self) -> None:
        assert delays("<delay=-1>a</delay>") == pytest.approx([0.0])

    def test_delay_tags_do_not_nest(self) -> None:
        # Second open replaces the first; the first close restores base
        result = delays("<delay=0.5>a<delay=0.3>b</delay>c</delay>d")
        assert result == pytest.approx([0.5, 0.3, 0.1, 0.1])


class TestSpeedTag:
    def test_speed_up(self) -> None:
        assert delays("<speed=2>ab</speed>c") == pytest.approx([0.05, 0.05, 0.1])

    def test_negative_speed_slows_down(self) -> None:
        assert delays("<speed=-10>a</speed>") == pytest.approx([1.0])

    def test_zero_speed_is_base(self) -> None:
        assert delays("<speed=0>a</speed>") == pytest.approx([0.1])

    def test_missing_speed_defaults_to_one(self) -> None:
        assert delays("<speed>a</speed>") == pytest.approx([0.1])

    def test_speed_replaces_delay(self) -> None:
        assert delays("<delay=0.5>a<speed=2>b</speed>c") == pytest.approx([0.5, 0.05, 0.1])

    def test_speed_to_delay(self) -> None:
        assert speed_to_delay(4.0, 0.2) == pytest.approx(0.05)
        assert speed_to_delay(-2.0, 0.2) == pytest.approx(0.4)
        assert speed_to_delay(0.0, 0.2) == pytest.approx(0.2)


class TestSprites:
    def test_sprite_counts_as_visible(self) -> None:
        timeline = Timeline()
        timeline.rebuild(tokenize("a<sprite=0>b"), 0.1)

        assert len(timeline) == 3
        assert timeline[1].is_sprite is True
        assert str(timeline[1]) == ""

    def test_sprite_uses_active_delay(self) -> None:
        assert delays("<delay=0.3><sprite=1></delay>") == pytest.approx([0.3])

    def test_length_matches_stripped_text_plus_sprites(self) -> None:
        text = "Sprites!<sprite index=0><sprite index=1><sprite index=2>Isn't that neat?"
        timeline = Timeline()
        timeline.rebuild(tokenize(text), 0.02)

        assert len(timeline) == len(strip_tags(text)) + 3


class TestAnimationRanges:
    def _ranges(self, text: str, presets: PresetLibrary | None = PRESETS) -> tuple[AnimationRange, ...]:
        timeline = Timeline()
        timeline.rebuild(tokenize(text), 0.1, presets=presets)
        return timeline.ranges

    def test_shake_range(self) -> None:
        assert self._ranges("<anim=shake>Hi</anim>") == (
            AnimationRange(0, 1, "shake", AnimationKind.SHAKE),
        )

    def test_curve_range_with_animation_tag(self) -> None:
        assert self._ranges("ab<animation=bounce>cd</animation>e") == (
            AnimationRange(2, 3, "bounce", AnimationKind.CURVE),
        )

    def test_indices_skip_tags(self) -> None:
        ranges = self._ranges("<b>x</b><delay=0.2>y</delay><anim=lightrot>z<i>w</i></anim>")
        assert ranges == (AnimationRange(2, 3, "lightrot", AnimationKind.SHAKE),)

    def test_sprites_shift_indices(self) -> None:
        ranges = self._ranges("<sprite=0><anim=fullshake>ab</anim>")
        assert ranges == (AnimationRange(1, 2, "fullshake", AnimationKind.SHAKE),)

    def test_multiple_ranges(self) -> None:
        text = (
            "Sample Shake Animations: <anim=lightrot>Light Rotation</anim>, "
            "<anim=lightpos>Light Position</anim>\n"
            "Sample Curve Animations: <animation=slowsine>Slow Sine</animation>"
        )
        ranges = self._ranges(text)

        assert [r.preset for r in ranges] == ["lightrot", "lightpos", "slowsine"]
        assert [r.kind for r in ranges] == [
            AnimationKind.SHAKE,
            AnimationKind.SHAKE,
            AnimationKind.CURVE,
        ]
        stripped = strip_tags(text)
        assert stripped[ranges[0].start_index : ranges[0].end_index + 1] == "Light Rotation"
        assert stripped[ranges[2].start_index : ranges[2].end_index + 1] == "Slow Sine"

    def test_shake_wins_over_curve(self) -> None:
        both = PresetLibrary(shake=["wobble"], curve=["wobble"])
        ranges = self._ranges("<anim=wobble>a</anim>", presets=both)
        assert ranges[0].kind is AnimationKind.SHAKE

    def test_empty_range(self) -> None:
        ranges = self._ranges("a<anim=shake></anim>b")
        assert ranges == (AnimationRange(1, 0, "shake", AnimationKind.SHAKE),)
        assert len(ranges[0]) == 0

    def test_unknown_preset_dropped_silently(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="texttyper"):
            ranges = self._ranges("<anim=nope>Hi</anim>")

        assert ranges == ()
        assert caplog.records == []

    def test_no_presets_drops_every_range(self) -> None:
        assert self._ranges("<anim=shake>Hi</anim>", presets=None) == ()

    def test_animation_tags_do_not_change_delays(self) -> None:
        assert delays("<anim=shake>ab</anim>", presets=PRESETS) == pytest.approx([0.1, 0.1])

    def test_resolve_animation_kind(self) -> None:
        assert resolve_animation_kind(PRESETS, "bounce") is AnimationKind.CURVE
        assert resolve_animation_kind(PRESETS, "missing") is None
        assert resolve_animation_kind(None, "shake") is None


class TestRebuild:
    def test_rebuild_replaces_previous_entries(self) -> None:
        timeline = Timeline()
        timeline.rebuild(tokenize("<anim=shake>abcdef</anim>"), 0.1, presets=PRESETS)
        timeline.rebuild(tokenize("xy"), 0.2, presets=PRESETS)

        assert timeline.delays == pytest.approx([0.2, 0.2])
        assert timeline.ranges == ()

    def test_characters_are_reused(self) -> None:
        timeline = Timeline()
        timeline.rebuild(tokenize("abc"), 0.1)
        first = timeline.characters
        timeline.rebuild(tokenize("xyz"), 0.1)

        assert {id(c) for c in timeline.characters} == {id(c) for c in first}
        assert [str(c) for c in timeline.characters] == ["x", "y", "z"]


class TestBuildTimeline:
    def test_uses_config(self) -> None:
        config = TyperConfig(print_delay=0.05, punctuation_delay_multiplier=2.0)
        assert build_timeline("a!", config=config).delays == pytest.approx([0.05, 0.1])

    def test_print_delay_override(self) -> None:
        assert build_timeline("Hi!", print_delay=0.1).delays == pytest.approx([0.1, 0.1, 0.8])

    def test_non_positive_print_delay_ignored(self) -> None:
        config = TyperConfig(print_delay=0.3)
        assert build_timeline("a", print_delay=0, config=config).delays == pytest.approx([0.3])

    def test_presets(self) -> None:
        timeline = build_timeline("<anim=bounce>ok</anim>", presets=PRESETS)
        assert timeline.ranges[0].kind is AnimationKind.CURVE
