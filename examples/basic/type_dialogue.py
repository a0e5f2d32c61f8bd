"""Type dialogue lines to the terminal, one character at a time."""

import sys
import time

from texttyper import PlainTextRenderer, PresetLibrary, RangeRecorder, RevealScheduler

LINES = [
    "Hello! My name is... <delay=0.5>NPC</delay>. Got it, <i><speed=-10>bub</speed></i>?",
    "You can <b>use</b> <size=40>text</size> and <color=#ff0000ff>color</color> tags.",
    "...",
    "Sprites!<sprite index=0><sprite index=1>Isn't that neat?",
    "Shake: <anim=lightrot>Light Rotation</anim>, curve: <animation=bounce>Bounce</animation>",
]

presets = PresetLibrary(shake=["lightrot", "lightpos", "fullshake"], curve=["slowsine", "bounce"])
ranges = RangeRecorder()
scheduler = RevealScheduler(PlainTextRenderer(), presets=presets, range_sink=ranges)
scheduler.add_character_listener(lambda ch: print(ch or "*", end="", flush=True))
scheduler.add_completed_listener(lambda: sys.stdout.write("\n"))

for line in LINES:
    scheduler.start(line, print_delay=0.04)
    last = time.monotonic()
    while scheduler.is_typing:
        time.sleep(scheduler.pending_delay or 0.01)
        now = time.monotonic()
        scheduler.advance(now - last)
        last = now
    for animation_range in ranges:
        print(f"  {animation_range.kind.value} '{animation_range.preset}': "
              f"{animation_range.start_index}..{animation_range.end_index}")
