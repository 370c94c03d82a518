"""
Drawing surface contract used by the game.

The engine only ever talks to a ``Surface``; the arcade host provides one
that replays the calls onto a window, and ``RecordingSurface`` keeps them
in memory for headless runs and tests. Coordinates are screen space with
the origin in the top-left corner and y pointing down.
"""

from typing import Any, List, Protocol, Tuple

Colour = Tuple[int, int, int]

BACKGROUND_COLOUR: Colour = (81, 81, 81)  # #515151
PLAYER_COLOUR: Colour = (255, 0, 0)
SHADOW_COLOUR: Colour = (0, 0, 0)
BORDER_COLOUR: Colour = (0, 0, 0)
TEXT_COLOUR: Colour = (255, 255, 255)
STAR_COLOUR: Colour = (255, 255, 255)


class Surface(Protocol):
    def width(self) -> float: ...

    def height(self) -> float: ...

    def clear(self, colour: Colour = (0, 0, 0)): ...

    def draw_rect_filled(self, x: float, y: float, w: float, h: float, colour: Colour): ...

    def draw_rect_filled_with_shadow(
        self, x: float, y: float, w: float, h: float,
        colour: Colour, shadow_colour: Colour = SHADOW_COLOUR, shadow_blur: float = 20,
    ): ...

    def draw_rect_filled_with_shadow_and_border(
        self, x: float, y: float, w: float, h: float,
        colour: Colour, shadow_colour: Colour = SHADOW_COLOUR, shadow_blur: float = 20,
        border_colour: Colour = BORDER_COLOUR, border_width: float = 1,
    ): ...

    def draw_line(self, x1: float, y1: float, x2: float, y2: float,
                  colour: Colour = STAR_COLOUR, width: float = 1): ...

    def draw_text(self, text: str, x: float, y: float, size: float,
                  colour: Colour = TEXT_COLOUR, align: str = "left"): ...


class RecordingSurface:
    """Surface that stores every draw call as ``(name, args)``"""

    def __init__(self, width: float = 800, height: float = 600):
        self._width = width
        self._height = height
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []
        self.frames = 0

    def width(self) -> float:
        return self._width

    def height(self) -> float:
        return self._height

    def resize(self, width: float, height: float):
        self._width = width
        self._height = height

    def clear(self, colour: Colour = (0, 0, 0)):
        self.calls = [("clear", (colour,))]
        self.frames += 1

    def draw_rect_filled(self, x, y, w, h, colour):
        self.calls.append(("rect", (x, y, w, h, colour)))

    def draw_rect_filled_with_shadow(self, x, y, w, h, colour,
                                     shadow_colour=SHADOW_COLOUR, shadow_blur=20):
        self.calls.append(("rect_shadow", (x, y, w, h, colour)))

    def draw_rect_filled_with_shadow_and_border(self, x, y, w, h, colour,
                                                shadow_colour=SHADOW_COLOUR, shadow_blur=20,
                                                border_colour=BORDER_COLOUR, border_width=1):
        self.calls.append(("rect_border", (x, y, w, h, colour)))

    def draw_line(self, x1, y1, x2, y2, colour=STAR_COLOUR, width=1):
        self.calls.append(("line", (x1, y1, x2, y2)))

    def draw_text(self, text, x, y, size, colour=TEXT_COLOUR, align="left"):
        self.calls.append(("text", (text, x, y, size, align)))

    def texts(self) -> List[str]:
        return [args[0] for name, args in self.calls if name == "text"]

    def count(self, name: str) -> int:
        return sum(1 for call_name, _ in self.calls if call_name == name)
