"""texttyper renderers.

Renderers display the text a RevealScheduler hands them and show only the
revealed prefix.

Available Renderers:
- PlainTextRenderer: keeps the visible prefix as a plain string

"""

from texttyper.renderers.plain import PlainTextRenderer
from texttyper.renderers.protocol import TextRenderer

__all__ = ["PlainTextRenderer", "TextRenderer"]
