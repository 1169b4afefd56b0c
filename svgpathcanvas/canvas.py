"""This submodule contains `PathCanvas`, the path-building front end of
svgpathcanvas.  A PathCanvas wraps a drawing surface, keeps track of the
current point, the start of the current subpath and the last curve control
points, and turns absolute, relative and SVG-style path commands into the
surface's primitive calls."""

# External dependencies
from math import sin, tan, pi
from cmath import phase
from warnings import warn

# Internal dependencies
from .arc import CenterArc, endpoint_to_center, normalize_sweep
from .errors import ArgumentCountError, NoCurrentPointError, \
    NoSmoothContextError
from .geometry import RADIANS, angle_between, to_radians, unit_vector
from .parser import Command, parse_path
from .state import PathState, GraphicsSnapshot
from .style import Style


# Default Parameters ##########################################################

DEFAULT_ANGLE_UNIT = RADIANS

# Canvas compatibility: absolute line and curve commands issued with no
# current point start a subpath at their first point instead of raising.
AUTO_OPEN_SUBPATH = True

# Turns closer than this to 0 or pi make arc_to() draw a straight line
COLLINEAR_TOL = 1e-12


def _check_count(args, command, name):
    group_size = command.group_size
    if not args or len(args) % group_size:
        raise ArgumentCountError(
            "{}() ({}) takes a positive multiple of {} arguments ({} given)"
            "".format(name, command.letter, group_size, len(args)))


def _points(coords):
    return [complex(coords[i], coords[i + 1])
            for i in range(0, len(coords), 2)]


def _groups(points, size):
    return zip(*[points[i::size] for i in range(size)])


class PathCanvas(object):
    """Builds paths on a `DrawingSurface`.

    Path commands take flat argument lists and may repeat, so
    ``canvas.line_to(10, 0, 10, 10)`` draws two segments.  Every command
    returns the canvas so calls can be chained::

        PathCanvas(surface).move_to(0, 0).line_to(50, 50).stroke()

    The SVG path letters are aliases of the commands (``M`` is `move_to`,
    ``m`` is `rmove_to`, ``z`` is `close_path`, ...) and `svgpath` replays a
    whole d-string.

    Caution:  the current point is not carried through coordinate
    transforms.  After translate(), scale(), rotate(), transform() or
    set_transform() there is no current point until an absolute command
    establishes one.
    """

    def __init__(self, surface, auto_open=AUTO_OPEN_SUBPATH,
                 angle_unit=DEFAULT_ANGLE_UNIT):
        self.surface = surface
        self.auto_open = auto_open
        self._default_angle_unit = angle_unit
        self._state = PathState(angle_unit)
        self.style = Style()
        self._snapshots = []

    def __repr__(self):
        return 'PathCanvas({!r}, {!r})'.format(self.surface, self._state)

    # Read-only state #########################################################

    @property
    def state(self):
        return self._state

    @property
    def current_point(self):
        return self._state.current

    @property
    def subpath_start(self):
        return self._state.subpath_start

    @property
    def angle_unit(self):
        """How angles passed to arc(), ellipse() and rotate() are measured,
        either 'radians' (the default) or 'degrees'.  The SVG arc commands
        always take degrees.  Saved and restored by save() and restore()."""
        return self._state.angle_unit

    @angle_unit.setter
    def angle_unit(self, unit):
        self._state.angle_unit = unit

    # Primitive emission ######################################################

    def _move(self, z):
        self.surface.move_to(z.real, z.imag)
        self._state.open(z)

    def _line(self, z):
        self.surface.line_to(z.real, z.imag)

    def _cubic(self, c1, c2, end):
        self.surface.bezier_curve_to(c1.real, c1.imag, c2.real, c2.imag,
                                     end.real, end.imag)

    def _quadratic(self, control, end):
        self.surface.quadratic_curve_to(control.real, control.imag,
                                        end.real, end.imag)

    def _ensure(self, z):
        """Opens a subpath at z if none is open (or raises, if auto_open is
        off)."""
        if not self._state.is_open and not self.auto_open:
            raise NoCurrentPointError(
                "No current point; start the path with a moveto")
        if self._state.ensure_open_at(z):
            self.surface.move_to(z.real, z.imag)

    # Move, line and close ####################################################

    def begin_path(self):
        """Discards the current path."""
        self.surface.begin_path()
        self._state.reset()
        return self

    # Calling it when a path is done reads better
    end_path = begin_path

    def move_to(self, *coords):
        """Starts a new subpath at (x, y).  Further coordinate pairs are
        passed on to line_to()."""
        _check_count(coords, Command.MOVETO, 'move_to')
        self._move(complex(coords[0], coords[1]))
        if len(coords) > 2:
            self.line_to(*coords[2:])
        return self

    def rmove_to(self, *coords):
        """Like move_to(), but relative to the current point.  With no
        current point the first pair is taken as absolute, as for an SVG
        path that starts with 'm'."""
        _check_count(coords, Command.RMOVETO, 'rmove_to')
        origin = self._state.current
        if origin is None:
            origin = 0j
        self._move(origin + complex(coords[0], coords[1]))
        if len(coords) > 2:
            self.rline_to(*coords[2:])
        return self

    def line_to(self, *coords):
        _check_count(coords, Command.LINETO, 'line_to')
        points = _points(coords)
        self._ensure(points[0])
        for z in points:
            self._line(z)
        self._state.set_current(points[-1])
        return self

    def rline_to(self, *coords):
        _check_count(coords, Command.RLINETO, 'rline_to')
        current = self._state.require_current()
        for offset in _points(coords):
            current += offset
            self._line(current)
        self._state.set_current(current)
        return self

    def hline_to(self, *xs):
        """Draws horizontal lines to each of the given x coordinates."""
        _check_count(xs, Command.HLINETO, 'hline_to')
        current = self._state.require_current()
        for x in xs:
            current = complex(x, current.imag)
            self._line(current)
        self._state.set_current(current)
        return self

    def rhline_to(self, *dxs):
        _check_count(dxs, Command.RHLINETO, 'rhline_to')
        current = self._state.require_current()
        for dx in dxs:
            current += dx
            self._line(current)
        self._state.set_current(current)
        return self

    def vline_to(self, *ys):
        """Draws vertical lines to each of the given y coordinates."""
        _check_count(ys, Command.VLINETO, 'vline_to')
        current = self._state.require_current()
        for y in ys:
            current = complex(current.real, y)
            self._line(current)
        self._state.set_current(current)
        return self

    def rvline_to(self, *dys):
        _check_count(dys, Command.RVLINETO, 'rvline_to')
        current = self._state.require_current()
        for dy in dys:
            current += 1j*dy
            self._line(current)
        self._state.set_current(current)
        return self

    def close_path(self, *args):
        """Closes the current subpath.  The current point goes back to the
        start of the subpath, so relative commands may follow."""
        if args:
            raise ArgumentCountError(
                "close_path() takes no arguments ({} given)".format(len(args)))
        self.surface.close_path()
        start = self._state.subpath_start
        if start is None:
            self._state.invalidate()
        else:
            self._state.set_current(start)
        return self

    # Cubic curves ############################################################

    def bezier_curve_to(self, *coords):
        """Adds cubic Bezier curves, each given by two control points and an
        end point (six numbers per curve)."""
        _check_count(coords, Command.CURVETO, 'bezier_curve_to')
        points = _points(coords)
        self._ensure(points[0])
        for c1, c2, end in _groups(points, 3):
            self._cubic(c1, c2, end)
        self._state.set_current(end)
        self._state.last_cubic_control = c2
        return self

    def rbezier_curve_to(self, *coords):
        _check_count(coords, Command.RCURVETO, 'rbezier_curve_to')
        current = self._state.require_current()
        for c1, c2, end in _groups(_points(coords), 3):
            c1, c2, end = c1 + current, c2 + current, end + current
            self._cubic(c1, c2, end)
            current = end
        self._state.set_current(current)
        self._state.last_cubic_control = c2
        return self

    def _smooth_cubics(self, coords, relative):
        control = self._state.last_cubic_control
        if control is None:
            raise NoSmoothContextError("Last command was not a cubic bezier")
        current = self._state.require_current()
        for c2, end in _groups(_points(coords), 2):
            if relative:
                c2, end = c2 + current, end + current
            self._cubic(2*current - control, c2, end)
            current, control = end, c2
        self._state.set_current(current)
        self._state.last_cubic_control = control

    def smooth_curve_to(self, *coords):
        """Adds cubic Bezier curves whose first control point is the
        reflection of the previous curve's second control point through the
        current point.  Only valid right after a cubic curve."""
        _check_count(coords, Command.SMOOTH_CURVETO, 'smooth_curve_to')
        self._smooth_cubics(coords, relative=False)
        return self

    def rsmooth_curve_to(self, *coords):
        _check_count(coords, Command.RSMOOTH_CURVETO, 'rsmooth_curve_to')
        self._smooth_cubics(coords, relative=True)
        return self

    # Quadratic curves ########################################################

    def quadratic_curve_to(self, *coords):
        _check_count(coords, Command.QUADTO, 'quadratic_curve_to')
        points = _points(coords)
        self._ensure(points[0])
        for control, end in _groups(points, 2):
            self._quadratic(control, end)
        self._state.set_current(end)
        self._state.last_quadratic_control = control
        return self

    def rquadratic_curve_to(self, *coords):
        _check_count(coords, Command.RQUADTO, 'rquadratic_curve_to')
        current = self._state.require_current()
        for control, end in _groups(_points(coords), 2):
            control, end = control + current, end + current
            self._quadratic(control, end)
            current = end
        self._state.set_current(current)
        self._state.last_quadratic_control = control
        return self

    def _smooth_quadratics(self, coords, relative):
        control = self._state.last_quadratic_control
        if control is None:
            raise NoSmoothContextError(
                "Last command was not a quadratic bezier")
        current = self._state.require_current()
        for end in _points(coords):
            if relative:
                end += current
            control = 2*current - control
            self._quadratic(control, end)
            current = end
        self._state.set_current(current)
        self._state.last_quadratic_control = control

    def smooth_quadratic_curve_to(self, *coords):
        """Adds quadratic Bezier curves whose control point is the
        reflection of the previous control point through the current point.
        Only valid right after a quadratic curve."""
        _check_count(coords, Command.SMOOTH_QUADTO,
                     'smooth_quadratic_curve_to')
        self._smooth_quadratics(coords, relative=False)
        return self

    def rsmooth_quadratic_curve_to(self, *coords):
        _check_count(coords, Command.RSMOOTH_QUADTO,
                     'rsmooth_quadratic_curve_to')
        self._smooth_quadratics(coords, relative=True)
        return self

    # Elliptical arcs #########################################################

    def _arc_segment(self, rx, ry, rotation, large_arc, sweep, end):
        if rx == 0 or ry == 0:
            self.line_to(end.real, end.imag)
            return
        start = self._state.require_current()
        if start == end:
            # an arc between coincident points is omitted entirely
            self._state.set_current(end)
            return
        arc = endpoint_to_center(start, complex(rx, ry), rotation,
                                 large_arc, sweep, end)
        self.surface.ellipse(arc.center.real, arc.center.imag,
                             arc.radius.real, arc.radius.imag, arc.phi,
                             arc.theta1, arc.theta2, not bool(sweep))
        self._state.set_current(end)

    def elliptical_arc_to(self, *args):
        """The SVG 'A' command: joins the current point to (x, y) with part of
        an ellipse.  Takes groups of seven numbers,
        ``rx, ry, rotation, large_arc, sweep, x, y``, where the rotation is
        in degrees whatever the canvas angle unit is.  A zero radius draws a
        straight line instead."""
        _check_count(args, Command.ARCTO, 'elliptical_arc_to')
        for rx, ry, rotation, large_arc, sweep, x, y in _groups(
                args, Command.ARCTO.group_size):
            self._arc_segment(rx, ry, rotation, large_arc, sweep,
                              complex(x, y))
        return self

    def relliptical_arc_to(self, *args):
        _check_count(args, Command.RARCTO, 'relliptical_arc_to')
        for rx, ry, rotation, large_arc, sweep, dx, dy in _groups(
                args, Command.RARCTO.group_size):
            end = self._state.require_current() + complex(dx, dy)
            self._arc_segment(rx, ry, rotation, large_arc, sweep, end)
        return self

    def _ellipse(self, center, radius, phi, start_angle, end_angle,
                 anticlockwise):
        if radius.real < 0 or radius.imag < 0:
            raise ValueError("The radii of an arc must not be negative.")
        # a sweep of a full turn or more stops back at start_angle
        shape = CenterArc(center, radius, phi, start_angle,
                          normalize_sweep(start_angle, end_angle,
                                          anticlockwise))
        if not self._state.is_open:
            self._move(shape.start)
        self.surface.ellipse(center.real, center.imag, radius.real,
                             radius.imag, phi, start_angle, end_angle,
                             anticlockwise)
        self._state.set_current(shape.end)

    def ellipse(self, cx, cy, rx, ry, rotation=0, start_angle=None,
                end_angle=None, anticlockwise=False):
        """Adds part of the ellipse centered on (cx, cy) with radii rx and
        ry, rotated by `rotation`, from `start_angle` (default 0) to
        `end_angle` (default a full turn).  Angles are measured in the
        canvas angle unit.  If there is a current point, a line joins it to
        the start of the arc."""
        unit = self._state.angle_unit
        if start_angle is None:
            start_angle = 0
        else:
            start_angle = to_radians(start_angle, unit)
        if end_angle is None:
            end_angle = 2*pi
        else:
            end_angle = to_radians(end_angle, unit)
        self._ellipse(complex(cx, cy), complex(rx, ry),
                      to_radians(rotation, unit), start_angle, end_angle,
                      anticlockwise)
        return self

    def arc(self, x, y, r, start_angle=None, end_angle=None,
            anticlockwise=False):
        """Like the 2D context arc(), with the angles optional."""
        return self.ellipse(x, y, r, r, 0, start_angle, end_angle,
                            anticlockwise)

    def arc_to(self, x1, y1, x2, y2, r):
        """Like the 2D context arcTo(): a line from the current point
        towards (x1, y1), rounded into the line towards (x2, y2) by an arc of
        radius r.  The current point ends up where the arc touches the
        second line."""
        if r < 0:
            raise ValueError("The radius of an arc must not be negative.")
        p1 = complex(x1, y1)
        p2 = complex(x2, y2)
        self._ensure(p1)
        p0 = self._state.current

        # Degenerate cases are just a straight line to p1
        if r == 0 or p0 == p1 or p1 == p2:
            return self._line_to_corner(p1)
        theta = abs(angle_between(p0 - p1, p2 - p1))
        if theta < COLLINEAR_TOL or pi - theta < COLLINEAR_TOL:
            return self._line_to_corner(p1)

        u0 = unit_vector(p0 - p1)
        u2 = unit_vector(p2 - p1)
        distance = r/tan(theta/2)  # from p1 to either tangent point
        tangent0 = p1 + distance*u0
        tangent2 = p1 + distance*u2
        center = p1 + r/sin(theta/2)*unit_vector(u0 + u2)

        turn = p1 - p0
        ahead = p2 - p1
        anticlockwise = turn.real*ahead.imag - turn.imag*ahead.real < 0

        self._line(tangent0)
        self.surface.ellipse(center.real, center.imag, r, r, 0,
                             phase(tangent0 - center),
                             phase(tangent2 - center), anticlockwise)
        self._state.set_current(tangent2)
        return self

    def _line_to_corner(self, p1):
        self._line(p1)
        self._state.set_current(p1)
        return self

    # SVG path data ###########################################################

    def svgpath(self, pathdef):
        """Draws the path described by an SVG path d-string, e.g.
        ``canvas.svgpath('M 0 0 L 10 0 L 10 10 Z')``.
        The whole string is tokenized before anything is drawn.  This does
        not call begin_path()."""
        for command, args in parse_path(pathdef):
            SVG_COMMANDS[command](self, *args)
        return self

    M = move_to
    m = rmove_to
    L = line_to
    l = rline_to
    H = hline_to
    h = rhline_to
    V = vline_to
    v = rvline_to
    C = bezier_curve_to
    c = rbezier_curve_to
    S = smooth_curve_to
    s = rsmooth_curve_to
    Q = quadratic_curve_to
    q = rquadratic_curve_to
    T = smooth_quadratic_curve_to
    t = rsmooth_quadratic_curve_to
    A = elliptical_arc_to
    a = relliptical_arc_to
    Z = z = close_path

    # Transformations #########################################################

    def translate(self, dx, dy):
        self.surface.translate(dx, dy)
        self._state.invalidate()
        return self

    def scale(self, sx, sy=None):
        if sy is None:
            sy = sx
        self.surface.scale(sx, sy)
        self._state.invalidate()
        return self

    def rotate(self, angle):
        """Rotates the coordinate system by `angle` (in the canvas angle
        unit)."""
        self.surface.rotate(to_radians(angle, self._state.angle_unit))
        self._state.invalidate()
        return self

    def transform(self, a, b, c, d, e, f):
        self.surface.transform(a, b, c, d, e, f)
        self._state.invalidate()
        return self

    def set_transform(self, a, b, c, d, e, f):
        self.surface.set_transform(a, b, c, d, e, f)
        self._state.invalidate()
        return self

    # Graphics state ##########################################################

    def _apply(self, snapshot):
        self._state.angle_unit = snapshot.angle_unit
        self.style = snapshot.style

    def save(self):
        """Saves the surface state together with the angle unit and
        style."""
        self.surface.save()
        self._snapshots.append(GraphicsSnapshot(self._state.angle_unit,
                                                self.style))
        return self

    def restore(self):
        if not self._snapshots:
            warn("restore() called without a matching save(); ignored.")
            return self
        self.surface.restore()
        self._apply(self._snapshots.pop())
        return self

    def revert(self):
        """Goes back to the state of the last save() without popping it;
        short for restore() followed by save()."""
        if not self._snapshots:
            warn("revert() called without a matching save(); ignored.")
            return self
        self.surface.restore()
        self.surface.save()
        self._apply(self._snapshots[-1])
        return self

    def set(self, **attributes):
        """Sets drawing attributes, e.g. ``set(line_width=2, fill_style='red')``.
        See `Style` for the recognized names."""
        self.style = self.style.updated(**attributes)
        return self

    # Painting ################################################################

    def _style_for(self, attributes):
        if attributes:
            return self.style.updated(**attributes)
        return self.style

    def fill(self, **attributes):
        """Fills the current path.  Any attributes given apply to this fill
        only."""
        self.surface.fill(self._style_for(attributes))
        return self

    def stroke(self, **attributes):
        """Strokes the current path.  Any attributes given apply to this
        stroke only."""
        self.surface.stroke(self._style_for(attributes))
        return self

    def paint(self, **attributes):
        """Fills and then strokes the current path."""
        style = self._style_for(attributes)
        self.surface.fill(style)
        self.surface.stroke(style)
        return self

    def reset(self):
        """Clears the surface and returns the canvas to its initial
        state."""
        self.surface.reset()
        self._state = PathState(self._default_angle_unit)
        self.style = Style()
        self._snapshots = []
        return self


SVG_COMMANDS = {
    Command.MOVETO: PathCanvas.move_to,
    Command.RMOVETO: PathCanvas.rmove_to,
    Command.LINETO: PathCanvas.line_to,
    Command.RLINETO: PathCanvas.rline_to,
    Command.HLINETO: PathCanvas.hline_to,
    Command.RHLINETO: PathCanvas.rhline_to,
    Command.VLINETO: PathCanvas.vline_to,
    Command.RVLINETO: PathCanvas.rvline_to,
    Command.CURVETO: PathCanvas.bezier_curve_to,
    Command.RCURVETO: PathCanvas.rbezier_curve_to,
    Command.SMOOTH_CURVETO: PathCanvas.smooth_curve_to,
    Command.RSMOOTH_CURVETO: PathCanvas.rsmooth_curve_to,
    Command.QUADTO: PathCanvas.quadratic_curve_to,
    Command.RQUADTO: PathCanvas.rquadratic_curve_to,
    Command.SMOOTH_QUADTO: PathCanvas.smooth_quadratic_curve_to,
    Command.RSMOOTH_QUADTO: PathCanvas.rsmooth_quadratic_curve_to,
    Command.ARCTO: PathCanvas.elliptical_arc_to,
    Command.RARCTO: PathCanvas.relliptical_arc_to,
    Command.CLOSEPATH: PathCanvas.close_path,
    Command.RCLOSEPATH: PathCanvas.close_path,
}
