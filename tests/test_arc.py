"""Tests for svgpathcanvas/arc.py: endpoint <-> center arc conversions."""
from math import pi, sqrt
import pytest
from svgpathcanvas.arc import (
    CenterArc, endpoint_to_center, center_to_endpoint, normalize_sweep,
)


ARCS = [
    # start, radius, rotation, large_arc, sweep, end
    (0j, 10 + 10j, 0, 0, 1, 20 + 0j),
    (0j, 10 + 5j, 0, 0, 0, 10 + 10j),
    (5 + 5j, 30 + 10j, 30, 1, 0, 40 + 15j),
    (5 + 5j, 30 + 10j, 30, 1, 1, 40 + 15j),
    (-3 + 2j, 4 + 7j, -45, 0, 1, 6 - 1j),
    (1 + 1j, 1 + 2j, 120, 1, 1, 9 + 4j),  # radii too small, scaled up
]


@pytest.mark.parametrize("start,radius,rotation,large_arc,sweep,end", ARCS)
def test_center_form_reproduces_endpoints(start, radius, rotation, large_arc,
                                          sweep, end):
    arc = endpoint_to_center(start, radius, rotation, large_arc, sweep, end)
    assert abs(arc.point(arc.theta1) - start) < 1e-6
    assert abs(arc.point(arc.theta1 + arc.delta) - end) < 1e-6


@pytest.mark.parametrize("start,radius,rotation,large_arc,sweep,end", ARCS)
def test_sweep_sign_and_size_follow_flags(start, radius, rotation, large_arc,
                                          sweep, end):
    arc = endpoint_to_center(start, radius, rotation, large_arc, sweep, end)
    assert (arc.delta > 0) == bool(sweep)
    assert abs(arc.delta) <= 2*pi
    assert -pi <= arc.theta1 <= pi
    if arc.radius == radius:
        assert (abs(arc.delta) > pi) == bool(large_arc)


def test_semicircle_center_and_angles():
    arc = endpoint_to_center(0j, 10 + 10j, 0, 0, 1, 20 + 0j)
    assert abs(arc.center - 10) < 1e-9
    assert arc.radius == 10 + 10j
    assert abs(arc.theta1 - pi) < 1e-9
    assert abs(arc.delta - pi) < 1e-9


def test_quarter_ellipse_picks_center_from_flags():
    # from (0,0) to (10,10) with radii 10: centers at (0,10) or (10,0).
    # The y-axis points down, so sweeping clockwise goes around (0,10).
    small_cw = endpoint_to_center(0j, 10 + 10j, 0, 0, 1, 10 + 10j)
    small_ccw = endpoint_to_center(0j, 10 + 10j, 0, 0, 0, 10 + 10j)
    assert abs(small_cw.center - 10j) < 1e-9
    assert abs(small_ccw.center - 10) < 1e-9
    assert abs(small_cw.theta1 + pi/2) < 1e-9
    assert abs(small_cw.delta - pi/2) < 1e-9
    assert abs(small_ccw.delta + pi/2) < 1e-9


def test_large_arc_uses_the_other_center():
    large_cw = endpoint_to_center(0j, 10 + 10j, 0, 1, 1, 10 + 10j)
    assert abs(large_cw.center - 10) < 1e-9
    assert abs(large_cw.delta - 3*pi/2) < 1e-9


def test_radii_scaled_up_preserving_ratio():
    arc = endpoint_to_center(0j, 1 + 2j, 0, 0, 1, 10 + 0j)
    assert arc.radius.real == pytest.approx(5)
    assert arc.radius.imag == pytest.approx(10)
    assert abs(arc.center - 5) < 1e-9


def test_negative_radii_use_absolute_value():
    arc = endpoint_to_center(0j, -10 - 10j, 0, 0, 1, 20 + 0j)
    assert arc.radius == 10 + 10j


def test_infeasible_radii_without_autoscale():
    with pytest.raises(ValueError):
        endpoint_to_center(0j, 1 + 1j, 0, 0, 1, 10 + 0j,
                           autoscale_radius=False)


def test_degenerate_arcs_have_no_center():
    with pytest.raises(ValueError):
        endpoint_to_center(5j, 1 + 1j, 0, 0, 1, 5j)
    with pytest.raises(ValueError):
        endpoint_to_center(0j, 0 + 1j, 0, 0, 1, 5j)


def test_center_arc_properties():
    arc = CenterArc(1 + 1j, 2 + 1j, pi/2, 0, -pi/2)
    assert arc.anticlockwise
    assert arc.theta2 == -pi/2
    assert arc.rotation == pytest.approx(90)
    # rotated a quarter turn, the x radius lies along the y axis
    assert abs(arc.start - (1 + 3j)) < 1e-12
    assert abs(arc.end - (2 + 1j)) < 1e-12


# --- normalize_sweep ---

def test_normalize_sweep_clockwise_wraps_forward():
    assert normalize_sweep(0, pi/2, False) == pytest.approx(pi/2)
    assert normalize_sweep(pi/2, 0, False) == pytest.approx(3*pi/2)


def test_normalize_sweep_anticlockwise_wraps_backward():
    assert normalize_sweep(pi/2, 0, True) == pytest.approx(-pi/2)
    assert normalize_sweep(0, pi/2, True) == pytest.approx(-3*pi/2)


def test_normalize_sweep_full_turn_is_clipped():
    assert normalize_sweep(0, 5*pi, False) == 2*pi
    assert normalize_sweep(0, -5*pi, True) == -2*pi


# --- center_to_endpoint ---

def test_center_to_endpoint_inverts_endpoint_to_center():
    arc = endpoint_to_center(5 + 5j, 30 + 10j, 30, 1, 0, 40 + 15j)
    start, pieces = center_to_endpoint(arc.center, arc.radius, arc.phi,
                                       arc.theta1, arc.theta2,
                                       arc.anticlockwise)
    assert abs(start - (5 + 5j)) < 1e-6
    (radius, rotation, large_arc, sweep, end), = pieces
    assert radius == arc.radius
    assert rotation == pytest.approx(30)
    assert large_arc is True
    assert sweep is False
    assert abs(end - (40 + 15j)) < 1e-6


def test_center_to_endpoint_splits_full_turn():
    start, pieces = center_to_endpoint(0j, 1 + 1j, 0, 0, 2*pi, False)
    assert abs(start - 1) < 1e-12
    assert len(pieces) == 2
    assert abs(pieces[0][4] + 1) < 1e-12
    assert abs(pieces[1][4] - 1) < 1e-12
    assert all(sweep for _, _, _, sweep, _ in pieces)


def test_center_to_endpoint_zero_sweep():
    start, pieces = center_to_endpoint(0j, 1 + 1j, 0, pi, pi, False)
    assert pieces == []
    assert abs(start + 1) < 1e-12


def test_round_trip_for_circle_quadrant():
    start, pieces = center_to_endpoint(0j, 2 + 2j, 0, 0, pi/2, False)
    (_, _, large_arc, sweep, end), = pieces
    arc = endpoint_to_center(start, 2 + 2j, 0, large_arc, sweep, end)
    assert abs(arc.center) < 1e-9
    assert arc.delta == pytest.approx(pi/2)
    assert abs(end - 2j) < 1e-12
    assert abs(abs(end - start) - 2*sqrt(2)) < 1e-12
