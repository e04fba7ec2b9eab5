"""A needle meter that moves an image across a background."""

from __future__ import annotations

from typing import Tuple

Size = Tuple[int, int]


class NeedleMeter:
    """Needle meter; it is vertical when it is taller than it is wide."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.needle_position = -1
        self.travel_path = 1
        self.vertical = False
        self.width = 0
        self.height = 0
        self.spacing_left = 0
        self.spacing_top = 0
        self.background_size: Size = (0, 0)
        self.needle_size: Size = (0, 0)

    def resize(self, width: int, height: int) -> None:
        """Change the meter's size and recalculate the needle's travel path."""
        self.width = int(width)
        self.height = int(height)
        self._initialise()

    def _initialise(self) -> None:
        self.vertical = self.height > self.width
        needle_width, needle_height = self.needle_size
        if self.vertical:
            self.travel_path = self.height - 2 * self.spacing_top - needle_height
        else:
            self.travel_path = self.width - 2 * self.spacing_left - needle_width

    def set_images(
        self,
        background_size: Size,
        needle_size: Size,
        spacing_left: int,
        spacing_top: int,
    ) -> None:
        """Set the background and needle image sizes and the spacing."""
        self.spacing_left = int(spacing_left)
        self.spacing_top = int(spacing_top)
        self.background_size = (int(background_size[0]), int(background_size[1]))
        self.needle_size = (int(needle_size[0]), int(needle_size[1]))
        self._initialise()

    def set_value(self, value: float) -> bool:
        """Move the needle to ``value`` (0.0 to 1.0); True if it moved."""
        old_position = self.needle_position
        position = int(value * self.travel_path + 0.5)
        position += self.spacing_top if self.vertical else self.spacing_left
        self.needle_position = position
        return position != old_position

    @property
    def needle_origin(self) -> Tuple[int, int]:
        """Top-left corner at which the needle image is drawn."""
        if self.vertical:
            return (self.spacing_left, self.needle_position)
        return (self.needle_position, self.spacing_top)