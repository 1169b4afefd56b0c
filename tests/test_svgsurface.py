"""Tests for svgpathcanvas/svgsurface.py: rendering canvas paths with
svgwrite."""
import re
from math import pi
import pytest
from svgpathcanvas import PathCanvas, SVGSurface


ARC_RE = re.compile(r'A (\S+),(\S+) (\S+) ([01]),([01]) (\S+),(\S+)')


@pytest.fixture
def svg():
    return SVGSurface(200, 100)


@pytest.fixture
def canvas(svg):
    return PathCanvas(svg)


def test_path_string(canvas, svg):
    canvas.svgpath("M0 0 L10 0 L10 10 Z")
    assert svg.d() == "M 0,0 L 10,0 L 10,10 Z"


def test_curves(canvas, svg):
    canvas.svgpath("M0 0 C1 2 3 4 5 6 s 1 1 2 2 Q 8 8 9 9.5")
    assert svg.d() == ("M 0,0 C 1,2 3,4 5,6 C 7,8 6,7 7,8 "
                       "Q 8,8 9,9.5")


def test_arc_becomes_svg_arc(canvas, svg):
    canvas.svgpath("M0 0 A10 10 0 0 1 20 0")
    assert svg.d() == "M 0,0 A 10,10 0 0,1 20,0"


def test_large_arc_flag_survives(canvas, svg):
    canvas.svgpath("M5 5 A30 10 30 1 0 40 15")
    (rx, ry, rotation, large_arc, sweep, x, y), = ARC_RE.findall(svg.d())
    assert (float(rx), float(ry)) == pytest.approx((30, 10))
    assert float(rotation) == pytest.approx(30)
    assert (large_arc, sweep) == ('1', '0')
    assert (float(x), float(y)) == pytest.approx((40, 15))


def test_full_circle_is_two_arcs(canvas, svg):
    canvas.arc(0, 0, 10)
    assert svg.d() == "M 10,0 A 10,10 0 0,1 -10,0 A 10,10 0 0,1 10,0"


def test_arc_after_a_point_gets_a_joining_line(canvas, svg):
    canvas.move_to(0, 0).arc(20, 0, 5, 0, 3.14159265358979)
    assert svg.d().startswith("M 0,0 L 25,0 A 5,5 0 0,1 15,")


def test_lone_line_to_starts_a_subpath(svg):
    svg.line_to(5, 5)
    svg.line_to(6, 5)
    assert svg.d() == "M 5,5 L 6,5"


def test_close_returns_to_subpath_start(canvas, svg):
    canvas.svgpath("M 1 1 l 4 0 z l 0 4")
    assert svg.d() == "M 1,1 L 5,1 Z L 1,5"


def test_begin_path_clears_the_path(canvas, svg):
    canvas.move_to(1, 1).line_to(2, 2).begin_path().move_to(3, 3)
    assert svg.d() == "M 3,3"


# --- transforms ---

def test_translate_maps_points(canvas, svg):
    canvas.translate(5, 5).move_to(0, 0).line_to(1, 0)
    assert svg.d() == "M 5,5 L 6,5"


def test_save_restore_transform(canvas, svg):
    canvas.save().translate(5, 5).restore().move_to(0, 0)
    assert svg.d() == "M 0,0"


def test_set_transform_replaces(canvas, svg):
    canvas.translate(5, 5).set_transform(2, 0, 0, 2, 1, 1)
    canvas.move_to(1, 1)
    assert svg.d() == "M 3,3"


def test_scaled_arc_radii(canvas, svg):
    canvas.scale(2, 1).svgpath("M0 0 A10 10 0 0 1 20 0")
    (rx, ry, _, large_arc, sweep, x, y), = ARC_RE.findall(svg.d())
    assert (float(rx), float(ry)) == pytest.approx((20, 10))
    assert (large_arc, sweep) == ('0', '1')
    assert (float(x), float(y)) == pytest.approx((40, 0), abs=1e-9)


def test_mirrored_arc_flips_sweep(canvas, svg):
    canvas.scale(1, -1).svgpath("M0 0 A10 10 0 0 1 20 0")
    (_, _, _, _, sweep, _, _), = ARC_RE.findall(svg.d())
    assert sweep == '0'


def test_flattened_ellipse_becomes_lines(canvas, svg):
    canvas.set_transform(1, 0, 0, 0, 0, 0).arc(0, 0, 10, 0, 3.14159265358979)
    assert svg.d() == "M 10,0 L -10,0"


# --- painting and output ---

def test_stroke_adds_a_styled_path(canvas, svg):
    canvas.set(line_width=3, stroke_style='red').svgpath("M0 0 L10 10")
    canvas.stroke()
    output = svg.tostring()
    assert '<path' in output
    assert 'd="M 0,0 L 10,10"' in output
    assert 'stroke="red"' in output
    assert 'stroke-width="3' in output
    assert 'fill="none"' in output


def test_fill_adds_a_path(canvas, svg):
    canvas.set(fill_style=(255, 0, 0)).arc(50, 50, 10).fill()
    output = svg.tostring()
    assert 'fill="#FF0000"' in output
    assert 'stroke="none"' in output


def test_painting_an_empty_path_warns(canvas, svg):
    with pytest.warns(UserWarning):
        canvas.fill()
    assert '<path' not in svg.tostring()


def test_drawing_size(svg):
    output = svg.tostring()
    assert 'width="200"' in output
    assert 'height="100"' in output


def test_reset_starts_a_new_drawing(canvas, svg):
    canvas.svgpath("M0 0 L1 1").stroke()
    canvas.reset()
    assert svg.d() == ''
    assert '<path' not in svg.tostring()


def test_save_svg(canvas, svg, tmp_path):
    canvas.svgpath("M0 0 L10 10").stroke()
    filename = str(tmp_path / 'out.svg')
    assert svg.save_svg(filename) == filename
    with open(filename) as f:
        contents = f.read()
    assert '<svg' in contents
    assert 'd="M 0,0 L 10,10"' in contents


def test_over_full_clockwise_circle_keeps_pen_at_start(canvas, svg):
    canvas.arc(0, 0, 10, 0, 3*pi).rline_to(0, 5)
    assert svg.d() == ("M 10,0 A 10,10 0 0,1 -10,0 A 10,10 0 0,1 10,0 "
                       "L 10,5")


def test_over_full_anticlockwise_circle_keeps_pen_at_start(canvas, svg):
    canvas.arc(0, 0, 10, 0, -3*pi, True).rline_to(0, 5)
    assert svg.d() == ("M 10,0 A 10,10 0 0,0 -10,0 A 10,10 0 0,0 10,0 "
                       "L 10,5")
