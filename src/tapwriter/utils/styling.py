from typing import Optional, Protocol, TextIO
from rich.color import ColorSystem
from rich.console import Console
from rich.style import Style

class Styler(Protocol):
    def style(self, tag: str, text: str) -> str: ...

class RichStyler:
    """Renders rich style tags ("red bold", "conceal", ...) as ANSI escapes."""
    def __init__(self, color_system: ColorSystem = ColorSystem.STANDARD):
        self.color_system = color_system

    def style(self, tag: str, text: str) -> str:
        return Style.parse(tag).render(text, color_system=self.color_system)

class PlainStyler:
    def style(self, tag: str, text: str) -> str:
        return text

def make_styler(stream: Optional[TextIO] = None, color: Optional[bool] = None) -> Styler:
    """Pick the styler once for a stream; color=None asks rich whether the stream takes colors."""
    if color is None:
        color = Console(file=stream).color_system is not None
    return RichStyler() if color else PlainStyler()
