"""Drawing options: axis orientation and decimal precision."""

from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .point import Point


class HorizontalDirection(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class VerticalDirection(str, Enum):
    UP = "up"
    DOWN = "down"


class Options(BaseModel):
    """Orientation and precision shared by every angle and point a builder makes."""

    model_config = ConfigDict(frozen=True)

    horizontal: HorizontalDirection = HorizontalDirection.RIGHT
    vertical: VerticalDirection = VerticalDirection.UP
    precision: int = Field(default=4, ge=0)

    @property
    def x_sign(self) -> int:
        return 1 if self.horizontal == HorizontalDirection.RIGHT else -1

    @property
    def y_sign(self) -> int:
        # Output space is screen-like: y grows downward
        return 1 if self.vertical == VerticalDirection.DOWN else -1

    def project(self, point: "Point") -> tuple[float, float]:
        """Map an internal point to output coordinates."""
        return point.x * self.x_sign, point.y * self.y_sign


DEFAULT = Options()
WINDOWS = Options(vertical=VerticalDirection.DOWN)
