import pytest
from pytest import approx
from unittest.mock import MagicMock

from draw2d.location import Location
from draw2d.polygon import Polygon
from draw2d.bus import ChangeRejected
from draw2d.events import PointAddEvent, LocationChangeEvent, ShapeEvent

SQUARE = [ (0, 0), (10, 0), (10, 10), (0, 10) ]

def _kinds(listener):
    return [ (c[0][0].kind, c[0][0].before_change) for c in listener.call_args_list ]

def test_polygon_init():
    poly = Polygon(SQUARE)
    assert poly.type == "polygon"
    assert poly.point_count() == 4
    assert poly.points() == SQUARE
    assert poly.point(2) == (10, 10)
    assert poly.bbox() == (0, 0, 10, 10)
    assert poly.closed(), "Polygons are closed by default"

    empty = Polygon()
    assert empty.point_count() == 0
    assert empty.bbox() == (0, 0, 0, 0)
    with pytest.raises(IndexError):
        empty.point(0)

def test_points_returns_copy():
    poly = Polygon(SQUARE)
    pts = poly.points()
    pts.append((100, 100))
    assert poly.point_count() == 4

def test_append_bbox():
    """The bounding box grows with the appended points."""
    poly = Polygon()
    assert poly.point_append((10, 10))
    assert poly.bbox() == (10, 10, 0, 0), "First point gives a degenerate box"
    assert poly.point_append((20, 10))
    assert poly.point_append((20, 20))
    assert poly.bbox() == (10, 10, 10, 10)
    assert poly.points() == [ (10, 10), (20, 10), (20, 20) ], "Points rescaled while appending"

@pytest.mark.parametrize("pt", [ (-5, 5), (15, 5), (5, -5), (5, 15), (-5, -5), (15, 15), (-5, 15) ])
def test_append_expands_in_every_direction(pt):
    """Whatever the corner order of the location, it grows to the new point."""
    for loc in [ Location(0, 0, 10, 10), Location(10, 10, 0, 0),
                 Location(10, 0, 0, 10), Location(0, 10, 10, 0) ]:
        poly = Polygon(SQUARE)
        poly.location_set(loc)
        points = poly.points()

        assert poly.point_append(pt)

        xs = [ p[0] for p in points + [ pt ] ]
        ys = [ p[1] for p in points + [ pt ] ]
        expected = (min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
        assert poly.bbox() == approx(expected), f"Wrong bbox for {loc}"
        assert poly.points() == points + [ pt ], "Existing points changed"

def test_append_only_moves_violated_corner():
    poly = Polygon(SQUARE)
    poly.location_set(Location(10, 10, 0, 0))
    assert poly.point_append((20, 5))
    # x grows on the side of corner 0, y stays put
    assert poly.location() == Location(20, 10, 0, 0)

def test_append_events():
    poly = Polygon()
    listener = MagicMock()
    poly.add_shape_listener(listener)

    poly.point_append((10, 10))
    assert _kinds(listener) == [ ("location_change", True), ("location_change", False),
                                 ("point_add", True), ("point_add", False) ]
    add_event = listener.call_args_list[2][0][0]
    assert isinstance(add_event, PointAddEvent)
    assert add_event.point_index == 0 and add_event.new_point == (10, 10)

    listener.reset_mock()
    # inside the bbox: no location change needed
    poly.point_append((20, 20))
    poly.point_append((15, 15))
    kinds = _kinds(listener)
    assert kinds[-2:] == [ ("point_add", True), ("point_add", False) ]
    assert kinds.count(("location_change", True)) == 1
    assert listener.call_args_list[-1][0][0].point_index == 2

def test_append_location_rejected():
    """If the bbox may not grow, the point is not added."""
    poly = Polygon(SQUARE)
    listener = MagicMock()
    poly.on("location_change", MagicMock(side_effect = ChangeRejected("fixed size")))
    poly.on("point_add", listener)

    res = poly.point_append((20, 20))
    assert not res and res.reason == "fixed size"
    assert poly.points() == SQUARE, "Point added despite rejection"
    assert poly.bbox() == (0, 0, 10, 10)
    assert not listener.called, "Point event fired despite rejection"

    # no location change needed, so this one goes through
    assert poly.point_append((5, 5))
    assert poly.point_count() == 5

def test_append_point_rejected():
    poly = Polygon(SQUARE)
    poly.on("point_add", MagicMock(side_effect = ChangeRejected()))
    assert not poly.point_append((5, 5))
    assert poly.point_count() == 4

def test_rescale():
    """Changing the location from outside scales the points."""
    poly = Polygon([ (0, 0), (10, 0), (10, 10) ])
    assert poly.bbox() == (0, 0, 10, 10)

    listener = MagicMock()
    poly.add_shape_listener(listener)

    assert poly.location_set(Location(0, 0, 20, 20))
    assert poly.points() == [ (0, 0), (20, 0), (20, 20) ]
    assert _kinds(listener) == [ ("location_change", True), ("location_change", False),
                                 ("shape_changed", False) ]

def test_rescale_move_and_flip():
    poly = Polygon([ (0, 0), (10, 0), (10, 10) ])
    assert poly.move(5, 5)
    assert poly.points() == [ (5, 5), (15, 5), (15, 15) ]

    # swap corner 0 and 2: mirrors the polygon on both axes
    assert poly.location_set(Location(15, 15, 5, 5))
    assert poly.points() == [ (15, 15), (5, 15), (5, 5) ]

def test_rescale_non_uniform():
    poly = Polygon(SQUARE)
    poly.location_set(Location(0, 0, 30, 5))
    assert poly.points() == [ (0, 0), (30, 0), (30, 5), (0, 5) ]

def test_rescale_degenerate_axis():
    """An axis without extent is only moved, not scaled."""
    poly = Polygon([ (5, 0), (5, 10) ])
    assert poly.bbox() == (5, 0, 0, 10)
    poly.location_set(Location(0, 0, 100, 20))
    assert poly.points() == [ (0, 0), (0, 20) ]

def test_rescale_rejected():
    poly = Polygon(SQUARE)
    poly.add_shape_listener(MagicMock(side_effect = ChangeRejected()))
    assert not poly.location_set(Location(0, 0, 20, 20))
    assert poly.points() == SQUARE

def test_closed_set():
    poly = Polygon(SQUARE)
    listener = MagicMock()
    poly.add_shape_listener(listener)

    assert poly.closed_set(True), "No-op not accepted"
    assert not listener.called, "Event fired without a change"

    assert poly.closed_set(False)
    assert not poly.closed()
    assert listener.call_count == 1
    assert type(listener.call_args[0][0]) is ShapeEvent

    poly = Polygon(SQUARE, closed = False)
    assert not poly.closed()

def test_contains_square():
    poly = Polygon(SQUARE)
    assert poly.contains((5, 5)), "Center is inside"
    assert not poly.contains((15, 5)), "Outside"
    assert not poly.contains((-1, 5)), "Outside"

def test_contains_edges():
    """Points on the minimum x/y edges are inside, on the maximum x/y edges outside."""
    poly = Polygon(SQUARE)
    assert poly.contains((0, 5)), "Minimum x edge"
    assert poly.contains((5, 0)), "Minimum y edge"
    assert not poly.contains((10, 5)), "Maximum x edge"
    assert not poly.contains((5, 10)), "Maximum y edge"
    assert poly.contains((0, 0)), "Corner at the minimum"
    assert not poly.contains((10, 10)), "Corner at the maximum"

def test_contains_triangle():
    poly = Polygon([ (0, 0), (10, 0), (10, 10) ])
    assert poly.contains((8, 2))
    assert not poly.contains((2, 8)), "Inside the bbox, outside the triangle"

def test_contains_open_polygon():
    """The closing edge counts for containment even if the polygon is open."""
    poly = Polygon(SQUARE, closed = False)
    assert poly.contains((5, 5))

def test_contains_few_points():
    poly = Polygon()
    assert not poly.contains((0, 0))
    poly.point_append((0, 0))
    assert not poly.contains((0, 0)), "A single point contains nothing"

def test_copy():
    poly = Polygon(SQUARE, closed = False)
    new = poly.copy()
    assert isinstance(new, Polygon)
    assert new.points() == SQUARE
    assert not new.closed()
    assert new.bbox() == (0, 0, 10, 10)

    new.point_append((20, 20))
    assert poly.point_count() == 4, "Points shared with the copy"
