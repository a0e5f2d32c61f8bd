"""Pause a reveal halfway, then finish it at double speed."""

from texttyper import PlainTextRenderer, RevealScheduler, TyperConfig

renderer = PlainTextRenderer()
scheduler = RevealScheduler(renderer, config=TyperConfig(print_delay=0.1))

scheduler.start("Slow at first. <b>Then</b> much faster!")
for _ in range(10):
    scheduler.tick()
scheduler.pause()
print(f"Paused at {scheduler.printed_characters}: {renderer.visible_text!r}")

scheduler.resume(config=TyperConfig(print_delay=0.05, print_amount=2))
waits = []
while (delay := scheduler.tick()) is not None:
    waits.append(delay)

print("Remaining waits:", waits)
print("Final text:", renderer.visible_text)
