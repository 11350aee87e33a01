"""
Factory Method — 2D game objects.

Every game object carries a Sprite and a Collider (more attributes can be
added later) and knows its own area and perimeter.

GameObjectFactory.create_object() picks the shape from an ObjectType and
the number of sizes given:

    one size   — Circle, Square, Triangle
    two sizes  — Rectangle, Obround

A type/size combination that matches no shape returns None. Obround is the
only shape that validates its input.
"""

from __future__ import annotations

import logging
import math
import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import Optional, Union

logger = logging.getLogger(__name__)


class InvalidGeometryError(ValueError):
    """Raised when shape dimensions violate a geometric precondition."""

    def __init__(self, shape: str, reason: str):
        self.shape = shape
        self.reason = reason
        super().__init__(reason)


# =============================================================================
# COMPONENTS
# =============================================================================

class Sprite(ABC):
    @abstractmethod
    def draw(self) -> str:
        ...


class Collider(ABC):
    @abstractmethod
    def collide(self) -> str:
        ...


class BasicSprite(Sprite):
    def draw(self) -> str:
        message = "Drawing a basic sprite..."
        print(message)
        return message


class BasicCollider(Collider):
    def collide(self) -> str:
        message = "Colliding basic collider..."
        print(message)
        return message


# =============================================================================
# GAME OBJECTS
# =============================================================================

class GameObject(ABC):
    """A shape with a sprite and a collider."""

    def __init__(
        self,
        sprite: Optional[Sprite] = None,
        collider: Optional[Collider] = None,
    ):
        self.sprite = sprite if sprite is not None else BasicSprite()
        self.collider = collider if collider is not None else BasicCollider()

    @property
    @abstractmethod
    def area(self) -> float:
        ...

    @property
    @abstractmethod
    def perimeter(self) -> float:
        ...

    def draw(self) -> str:
        return self.sprite.draw()

    def collide(self) -> str:
        return self.collider.collide()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(area={self.area:.2f}, perimeter={self.perimeter:.2f})"


class Circle(GameObject):
    def __init__(self, radius: float, **components):
        super().__init__(**components)
        self.radius = radius

    @property
    def area(self) -> float:
        return math.pi * self.radius * self.radius

    @property
    def perimeter(self) -> float:
        return 2 * math.pi * self.radius

    @property
    def circumference(self) -> float:
        return self.perimeter


class Square(GameObject):
    def __init__(self, side_length: float, **components):
        super().__init__(**components)
        self.side_length = side_length

    @property
    def area(self) -> float:
        return self.side_length * self.side_length

    @property
    def perimeter(self) -> float:
        return 4 * self.side_length


class Triangle(GameObject):
    """Equilateral triangle."""

    def __init__(self, side_length: float, **components):
        super().__init__(**components)
        self.side_length = side_length

    @property
    def area(self) -> float:
        return math.sqrt(3) / 4 * self.side_length ** 2

    @property
    def perimeter(self) -> float:
        return 3 * self.side_length


class Rectangle(GameObject):
    def __init__(self, length: float, height: float, **components):
        super().__init__(**components)
        self.length = length
        self.height = height

    @property
    def area(self) -> float:
        return self.length * self.height

    @property
    def perimeter(self) -> float:
        return 2 * (self.length + self.height)


class Obround(GameObject):
    """
    Stadium shape: a rectangle capped by two semicircles.

    ``length`` is the overall length including both caps, ``height`` the
    diameter of the caps. Requires length >= height.
    """

    def __init__(self, length: float, height: float, **components):
        if length < height:
            raise InvalidGeometryError(
                "obround",
                "Length cannot be less than height for an obround",
            )
        super().__init__(**components)
        self.length = length
        self.height = height

    @property
    def straight_length(self) -> float:
        return self.length - self.height

    @property
    def area(self) -> float:
        radius = self.height / 2
        return math.pi * radius * radius + self.straight_length * self.height

    @property
    def perimeter(self) -> float:
        return 2 * self.straight_length + math.pi * self.height


# =============================================================================
# FACTORY
# =============================================================================

class ObjectType(Enum):
    CIRCLE = "circle"
    SQUARE = "square"
    RECTANGLE = "rectangle"
    TRIANGLE = "triangle"
    OBROUND = "obround"


ONE_SIZE_SHAPES: dict[ObjectType, type[GameObject]] = {
    ObjectType.CIRCLE: Circle,
    ObjectType.SQUARE: Square,
    ObjectType.TRIANGLE: Triangle,
}

TWO_SIZE_SHAPES: dict[ObjectType, type[GameObject]] = {
    ObjectType.RECTANGLE: Rectangle,
    ObjectType.OBROUND: Obround,
}


class GameObjectFactory:
    """Creates game objects by type and size."""

    @staticmethod
    def create_object(
        object_type: Union[ObjectType, str],
        size: float,
        size2: Optional[float] = None,
    ) -> Optional[GameObject]:
        """
        Create the shape for ``object_type``.

        Accepts an ObjectType member or its string value (case-insensitive).

        Returns:
            The new GameObject, or None if the type is unknown or is not
            built from the number of sizes given

        Raises:
            InvalidGeometryError: If an Obround is shorter than it is high
        """
        object_type = _coerce_object_type(object_type)
        if size2 is None:
            shape_cls = ONE_SIZE_SHAPES.get(object_type)
            args: tuple[float, ...] = (size,)
        else:
            shape_cls = TWO_SIZE_SHAPES.get(object_type)
            args = (size, size2)

        if shape_cls is None:
            logger.debug("No shape for %s with %d size(s)", object_type, len(args))
            return None

        return shape_cls(*args)


def _coerce_object_type(object_type: Union[ObjectType, str, None]) -> Optional[ObjectType]:
    if isinstance(object_type, ObjectType):
        return object_type
    if isinstance(object_type, str):
        try:
            return ObjectType(object_type.strip().lower())
        except ValueError:
            return None
    return None


# =============================================================================
# DEMO
# =============================================================================

def run_demo(obround: tuple[float, float] = (9.0, 2.0)) -> list[GameObject]:
    """
    Create one of each shape, then draw and collide them.

    A failed Obround is reported on stderr and skipped.
    """
    circle = GameObjectFactory.create_object(ObjectType.CIRCLE, 5.0)
    square = GameObjectFactory.create_object(ObjectType.SQUARE, 5.0)
    triangle = GameObjectFactory.create_object(ObjectType.TRIANGLE, 5.0)
    rectangle = GameObjectFactory.create_object(ObjectType.RECTANGLE, 10.0, 2.0)

    obround_obj: Optional[GameObject] = None
    try:
        obround_obj = GameObjectFactory.create_object(ObjectType.OBROUND, *obround)
    except InvalidGeometryError as e:
        print(f"Failed to create obround: {e}", file=sys.stderr)

    objects = [circle, triangle, square, rectangle]
    if obround_obj is not None:
        objects.append(obround_obj)

    for obj in objects:
        obj.draw()
        obj.collide()

    return objects
