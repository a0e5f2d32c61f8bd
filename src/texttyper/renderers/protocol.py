"""TextRenderer protocol: stable interface for reveal renderers.

Any object with ``set_stripped_text(text)`` and ``set_visible_count(n)``
conforms. ``PlainTextRenderer`` is the reference implementation.

Example:
    from texttyper.renderers.protocol import TextRenderer

    def show(renderer: TextRenderer, text: str) -> None:
        renderer.set_stripped_text(text)
        renderer.set_visible_count(len(text))

"""

from texttyper.protocols import TextRenderer

__all__ = ["TextRenderer"]
