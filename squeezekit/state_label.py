"""A label with an off, on and active state, each with its own image."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Tuple

_HEX_COLOUR = re.compile(r"[0-9a-fA-F]{6}")


class LabelState(IntEnum):
    """States a state label can be in."""

    OFF = 0
    ON = 1
    ACTIVE = 2


@dataclass(frozen=True)
class _Rect:
    x: int
    y: int
    width: int
    height: int


def _image_size(image: Any) -> Tuple[int, int]:
    size = getattr(image, "size", image)
    width, height = size
    return int(width), int(height)


def _parse_colour(text: str) -> int:
    """Parse an ``rrggbb`` hex string into an opaque ARGB integer."""
    if not _HEX_COLOUR.fullmatch(text):
        raise ValueError(f"invalid colour {text!r}; expected six hex digits")
    return int("ff" + text, 16)


class StateLabel:
    """Text label drawn over a background image chosen by its state.

    Images may be any objects that are ``(width, height)`` pairs or carry
    such a pair in a ``size`` attribute; all three must have the same size.
    """

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.spacing_left = 0
        self.spacing_top = 0
        self.state = LabelState.OFF
        self.font_size = 0

        self.image_off: Any = None
        self.image_on: Any = None
        self.image_active: Any = None

        self.colour_on: Optional[int] = None
        self.colour_active: Optional[int] = None

        self.text = ""
        self.text_colour: Optional[int] = None
        self.background: Any = None

        self.label_bounds = _Rect(0, 0, 0, 0)
        self.background_bounds = _Rect(0, 0, 0, 0)

    def resize(self, width: int, height: int) -> None:
        """Lay out the text and the background for a new size."""
        width, height = int(width), int(height)
        self.label_bounds = _Rect(
            self.spacing_left,
            self.spacing_top,
            width - 2 * self.spacing_left,
            height - 2 * self.spacing_top,
        )
        self.background_bounds = _Rect(0, 0, width, height)

    def set_state(self, state: LabelState, force: bool = False) -> bool:
        """Switch to ``state``; return True if the label was updated."""
        state = LabelState(state)
        if state == self.state and not force:
            return False
        self.state = state
        self._update()
        return True

    def _update(self) -> None:
        if self.state == LabelState.ACTIVE:
            self.background = self.image_active
            self.text_colour = self.colour_active
        elif self.state == LabelState.ON:
            self.background = self.image_on
            self.text_colour = self.colour_on
        else:
            self.background = self.image_off

    def set_images(
        self,
        image_off: Any,
        image_on: Any,
        image_active: Any,
        colour_on: str,
        colour_active: str,
        spacing_left: int,
        spacing_top: int,
        font_size: int,
    ) -> None:
        """Set the state images, text colours (``rrggbb``), spacing and font."""
        size_off = _image_size(image_off)
        if _image_size(image_on) != size_off or _image_size(image_active) != size_off:
            raise ValueError("state images must all have the same size")

        parsed_on = _parse_colour(colour_on)
        parsed_active = _parse_colour(colour_active)

        self.spacing_left = int(spacing_left)
        self.spacing_top = int(spacing_top)
        self.font_size = int(font_size)

        self.colour_on = parsed_on
        self.colour_active = parsed_active
        self.text_colour = parsed_on

        self.image_off = image_off
        self.image_on = image_on
        self.image_active = image_active

        self._update()