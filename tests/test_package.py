import shape2d
from shape2d import Ellipse, GeometryError, Polygon, Shape, Triangle2


def test_exports():
    assert shape2d.SIX_DECIMAL_TOLERANCE == 1e-6
    assert isinstance(shape2d.__version__, str)
    for cls in (Ellipse, Polygon, Triangle2):
        assert cls.__module__.startswith('shape2d.')


def test_shapes_are_interchangeable():
    shapes = [
        Ellipse((0, 0), 2, 1),
        Polygon([(-1, -1), (1, -1), (1, 1), (-1, 1)]),
        Triangle2([(-1, -1), (2, -1), (-1, 2)]),
    ]
    for s in shapes:
        assert isinstance(s, Shape)
        assert s.contains((0, 0))
        assert not s.contains((5, 5))


def test_errors_are_value_errors():
    assert issubclass(shape2d.DegenerateShapeError, ValueError)
    assert issubclass(shape2d.InvalidGeometryError, GeometryError)
    assert issubclass(shape2d.GeometryArithmeticError, ZeroDivisionError)
