"""This submodule contains `SVGSurface`, a drawing surface that renders the
paths built by a `PathCanvas` into an SVG document (via svgwrite)."""

# External dependencies
from math import cos, sin, atan2, degrees
from warnings import warn
import numpy as np
from svgwrite import Drawing

# Internal dependencies
from .arc import center_to_endpoint
from .misctools import isclose, format_number, open_in_browser
from .surface import DrawingSurface


# Default Parameters ##########################################################

DEFAULT_SIZE = (600, 600)  # width, height in user units


def _affine(a, b, c, d, e, f):
    """returns the 3x3 matrix of the canvas transform (a, b, c, d, e, f)."""
    tf = np.identity(3)
    tf[0:2, 0:3] = np.array([[a, c, e], [b, d, f]])
    return tf


def _point(z):
    return '{},{}'.format(format_number(z.real), format_number(z.imag))


class SVGSurface(DrawingSurface):
    """Draws into an svgwrite `Drawing`.

    Path primitives accumulate into a d-string, in device coordinates (the
    transform current when each primitive is issued is applied to it, as on
    a canvas).  Each fill() or stroke() adds a <path> element carrying the
    d-string built so far."""

    def __init__(self, width=None, height=None, filename='canvas.svg'):
        if width is None:
            width = DEFAULT_SIZE[0]
        if height is None:
            height = DEFAULT_SIZE[1]
        self.size = (width, height)
        self.filename = filename
        self.reset()

    def reset(self):
        self.drawing = Drawing(self.filename, size=self.size)
        self.ctm = np.identity(3)
        self._stack = []
        self.begin_path()

    # Path primitives #########################################################

    def begin_path(self):
        self._parts = []
        self._current = None
        self._subpath_start = None

    def _map(self, x, y):
        x, y, _ = self.ctm.dot([x, y, 1])
        return complex(x, y)

    def _append(self, command, *points):
        self._parts.append(' '.join([command] + [_point(z) for z in points]))

    def move_to(self, x, y):
        z = self._map(x, y)
        self._append('M', z)
        self._current = self._subpath_start = z

    def line_to(self, x, y):
        z = self._map(x, y)
        if self._current is None:
            # a lone lineTo() on a canvas starts the subpath
            self._append('M', z)
            self._subpath_start = z
        else:
            self._append('L', z)
        self._current = z

    def bezier_curve_to(self, c1x, c1y, c2x, c2y, x, y):
        if self._current is None:
            self.move_to(c1x, c1y)
        end = self._map(x, y)
        self._append('C', self._map(c1x, c1y), self._map(c2x, c2y), end)
        self._current = end

    def quadratic_curve_to(self, cx, cy, x, y):
        if self._current is None:
            self.move_to(cx, cy)
        end = self._map(x, y)
        self._append('Q', self._map(cx, cy), end)
        self._current = end

    def ellipse(self, cx, cy, rx, ry, rotation, start_angle, end_angle,
                anticlockwise):
        start, pieces = center_to_endpoint(complex(cx, cy), complex(rx, ry),
                                           rotation, start_angle, end_angle,
                                           anticlockwise)
        start = self._map(start.real, start.imag)
        if self._current is None:
            self._append('M', start)
            self._subpath_start = start
        elif not isclose(self._current, start):
            self._append('L', start)
        self._current = start

        if not pieces:
            return
        radius, phi, flip = self._device_ellipse(rx, ry, rotation)
        for _, _, large_arc, sweep, end in pieces:
            end = self._map(end.real, end.imag)
            if radius is None:
                # the transform squashes the ellipse flat
                self._append('L', end)
            else:
                self._parts.append('A {} {} {:d},{:d} {}'.format(
                    _point(radius), format_number(phi), int(large_arc),
                    int(sweep != flip), _point(end)))
            self._current = end

    def _device_ellipse(self, rx, ry, rotation):
        """returns the radii, rotation (in degrees) and orientation flip of
        the ellipse after the linear part of the current transform."""
        linear = self.ctm[0:2, 0:2]
        if np.allclose(linear, np.identity(2)):
            return complex(rx, ry), degrees(rotation), False
        axes = np.array([[cos(rotation), -sin(rotation)],
                         [sin(rotation), cos(rotation)]]).dot(
                             np.diag([rx, ry]))
        u, s, _ = np.linalg.svd(linear.dot(axes))
        if np.isclose(s[1], 0):
            return None, None, False
        flip = bool(np.linalg.det(linear) < 0)
        return complex(s[0], s[1]), degrees(atan2(u[1, 0], u[0, 0])), flip

    def close_path(self):
        self._parts.append('Z')
        self._current = self._subpath_start

    def d(self):
        """returns the d-string of the current path."""
        return ' '.join(self._parts)

    # Graphics state ##########################################################

    def save(self):
        self._stack.append(self.ctm.copy())

    def restore(self):
        if self._stack:
            self.ctm = self._stack.pop()

    def transform(self, a, b, c, d, e, f):
        self.ctm = self.ctm.dot(_affine(a, b, c, d, e, f))

    def set_transform(self, a, b, c, d, e, f):
        self.ctm = _affine(a, b, c, d, e, f)

    def translate(self, dx, dy):
        self.transform(1, 0, 0, 1, dx, dy)

    def scale(self, sx, sy):
        self.transform(sx, 0, 0, sy, 0, 0)

    def rotate(self, angle):
        self.transform(cos(angle), sin(angle), -sin(angle), cos(angle), 0, 0)

    # Painting ################################################################

    def _add_path(self, **attribs):
        d = self.d()
        if not d:
            warn("Nothing to paint; the current path is empty.")
            return None
        path = self.drawing.path(d=d, **attribs)
        self.drawing.add(path)
        return path

    def fill(self, style):
        return self._add_path(fill=style.fill_style, stroke='none',
                              opacity=style.global_alpha)

    def stroke(self, style):
        return self._add_path(fill='none', stroke=style.stroke_style,
                              **style.svg_attributes())

    # Output ##################################################################

    def tostring(self):
        return self.drawing.tostring()

    def save_svg(self, filename=None, openinbrowser=False):
        """Writes the drawing (pretty-printed) to `filename`, or to the
        filename given at construction."""
        if filename is None:
            self.drawing.save(pretty=True)
            filename = self.drawing.filename
        else:
            self.drawing.saveas(filename, pretty=True)
        if openinbrowser:
            open_in_browser(filename)
        return filename
