"""
Tests for the Factory Method demo.

These tests verify:
1. Area and perimeter formulas for every shape
2. Obround precondition enforcement
3. Type/arity mismatches return None instead of raising
4. Sprite and collider delegation
"""

import math

import pytest

from creational.factory_method.shapes import (
    BasicCollider,
    Circle,
    GameObject,
    GameObjectFactory,
    InvalidGeometryError,
    Obround,
    ObjectType,
    Rectangle,
    Sprite,
    Square,
    Triangle,
    run_demo,
)


create = GameObjectFactory.create_object


# =============================================================================
# FORMULA TESTS
# =============================================================================

class TestShapeFormulas:
    """Test closed-form geometry for each shape."""

    @pytest.mark.parametrize("length, height", [(10.0, 2.0), (1.0, 1.0), (3.5, 7.25)])
    def test_rectangle(self, length, height):
        """Rectangle area is l*h and perimeter 2(l+h)."""
        rect = create(ObjectType.RECTANGLE, length, height)

        assert isinstance(rect, Rectangle)
        assert rect.area == pytest.approx(length * height)
        assert rect.perimeter == pytest.approx(2 * (length + height))

    @pytest.mark.parametrize("radius", [0.5, 1.0, 5.0, 12.3])
    def test_circle(self, radius):
        """Circle area is πr² and circumference 2πr."""
        circle = create(ObjectType.CIRCLE, radius)

        assert isinstance(circle, Circle)
        assert circle.area == pytest.approx(math.pi * radius ** 2)
        assert circle.circumference == pytest.approx(2 * math.pi * radius)
        assert circle.perimeter == circle.circumference

    def test_square(self):
        """Square area is s² and perimeter 4s."""
        square = create(ObjectType.SQUARE, 5.0)

        assert isinstance(square, Square)
        assert square.area == pytest.approx(25.0)
        assert square.perimeter == pytest.approx(20.0)

    def test_equilateral_triangle(self):
        """Triangle area is √3/4·s² and perimeter 3s."""
        triangle = create(ObjectType.TRIANGLE, 4.0)

        assert isinstance(triangle, Triangle)
        assert triangle.area == pytest.approx(math.sqrt(3) * 4.0)
        assert triangle.perimeter == pytest.approx(12.0)

    def test_obround(self):
        """Obround is a rectangle plus two semicircular caps."""
        obround = create(ObjectType.OBROUND, 9.0, 2.0)

        assert isinstance(obround, Obround)
        assert obround.area == pytest.approx(math.pi + 7.0 * 2.0)
        assert obround.perimeter == pytest.approx(2 * 7.0 + 2 * math.pi)

    def test_square_obround_is_circle(self):
        """An obround with length == height degenerates to a circle."""
        obround = create(ObjectType.OBROUND, 4.0, 4.0)

        assert obround.area == pytest.approx(math.pi * 4.0)
        assert obround.perimeter == pytest.approx(math.pi * 4.0)

    def test_negative_sizes_are_not_validated(self):
        """Shapes other than Obround accept any size."""
        square = create(ObjectType.SQUARE, -2.0)

        assert square.perimeter == pytest.approx(-8.0)


# =============================================================================
# FACTORY TESTS
# =============================================================================

class TestGameObjectFactory:
    """Test the creation method."""

    def test_obround_rejects_length_below_height(self):
        """length < height raises with a descriptive message."""
        with pytest.raises(InvalidGeometryError, match="Length cannot be less than height"):
            create(ObjectType.OBROUND, 2.0, 9.0)

    def test_geometry_error_is_value_error(self):
        """InvalidGeometryError can be caught as ValueError."""
        with pytest.raises(ValueError) as exc_info:
            Obround(1.0, 3.0)

        assert exc_info.value.shape == "obround"

    @pytest.mark.parametrize("object_type", [ObjectType.RECTANGLE, ObjectType.OBROUND])
    def test_two_size_type_with_one_size_returns_none(self, object_type):
        """Two-size shapes are not created from one size."""
        assert create(object_type, 5.0) is None

    @pytest.mark.parametrize("object_type", [
        ObjectType.CIRCLE, ObjectType.SQUARE, ObjectType.TRIANGLE,
    ])
    def test_one_size_type_with_two_sizes_returns_none(self, object_type):
        """One-size shapes are not created from two sizes."""
        assert create(object_type, 5.0, 2.0) is None

    @pytest.mark.parametrize("name, expected", [
        ("circle", Circle),
        ("SQUARE", Square),
        (" triangle ", Triangle),
    ])
    def test_string_type_with_one_size(self, name, expected):
        """String type names select the same shapes as ObjectType."""
        assert isinstance(create(name, 5.0), expected)

    def test_string_type_with_two_sizes(self):
        """String type names work for two-size shapes too."""
        assert isinstance(create("rectangle", 10.0, 2.0), Rectangle)
        assert isinstance(create("obround", 9.0, 2.0), Obround)

    @pytest.mark.parametrize("name", ["hexagon", "", "circles", None])
    def test_unknown_type_returns_none(self, name):
        """Unknown type names return None instead of raising."""
        assert create(name, 1.0) is None
        assert create(name, 1.0, 2.0) is None

    def test_string_obround_still_validates(self):
        """A string-selected obround enforces its precondition."""
        with pytest.raises(InvalidGeometryError):
            create("obround", 2.0, 9.0)

    def test_mismatched_obround_does_not_validate(self):
        """A mismatched arity returns None before any validation."""
        assert create(ObjectType.OBROUND, 1.0) is None

    @pytest.mark.parametrize("object_type", list(ObjectType))
    def test_every_product_is_a_game_object(self, object_type):
        """Whatever is created implements GameObject."""
        obj = create(object_type, 5.0) or create(object_type, 5.0, 2.0)

        assert isinstance(obj, GameObject)


# =============================================================================
# COMPONENT TESTS
# =============================================================================

class TestComponents:
    """Test sprite and collider delegation."""

    def test_default_components(self, capsys):
        """Shapes draw and collide through basic components."""
        circle = create(ObjectType.CIRCLE, 1.0)

        circle.draw()
        circle.collide()

        assert capsys.readouterr().out == (
            "Drawing a basic sprite...\n"
            "Colliding basic collider...\n"
        )

    def test_injected_sprite(self):
        """A custom sprite replaces the basic one."""

        class GlowSprite(Sprite):
            def draw(self) -> str:
                return "glow"

        square = Square(2.0, sprite=GlowSprite())

        assert square.draw() == "glow"
        assert isinstance(square.collider, BasicCollider)


# =============================================================================
# DEMO TESTS
# =============================================================================

class TestShapesDemo:
    """Test the shapes demo flow."""

    def test_demo_draws_all_shapes(self, capsys):
        """Default demo creates and exercises five objects."""
        objects = run_demo()

        captured = capsys.readouterr()
        assert len(objects) == 5
        assert captured.out.count("Drawing a basic sprite...") == 5
        assert captured.err == ""

    def test_demo_reports_failed_obround(self, capsys):
        """A bad obround goes to stderr and is skipped."""
        objects = run_demo(obround=(2.0, 9.0))

        captured = capsys.readouterr()
        assert len(objects) == 4
        assert not any(isinstance(obj, Obround) for obj in objects)
        assert captured.err == (
            "Failed to create obround: Length cannot be less than height for an obround\n"
        )
