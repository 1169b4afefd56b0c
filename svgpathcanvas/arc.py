"""This submodule contains the conversions between the two ways of describing
an elliptical arc: the endpoint parameterization used by the SVG `A` path
command and the center parameterization used by the canvas `ellipse()`
primitive.
See http://www.w3.org/TR/SVG/implnote.html#ArcImplementationNotes"""

# External dependencies
from math import sqrt, cos, sin, degrees, radians, pi
from cmath import exp

# Internal dependencies
from .geometry import angle_between, rotate
from .misctools import isclose


# Default Parameters ##########################################################

# Scale the radii up when no ellipse with the requested radii joins the
# endpoints (as the SVG specification requires).  If False, such arcs raise.
AUTOSCALE_RADIUS = True

TWO_PI = 2*pi


class CenterArc(object):
    def __init__(self, center, radius, phi, theta1, delta, start=None,
                 end=None):
        """
        A center-parameterized elliptical arc.

        Parameters
        ----------
        center : complex
            The center of the arc's ellipse.
        radius : complex
            rx + 1j*ry, the radii of the ellipse along its own axes.
        phi : float
            The rotation (in radians) of the ellipse's x-axis from the
            positive x-axis of the current coordinate system.
        theta1 : float
            The parametric angle (in radians) of the start point.  Ranges
            from -pi to pi when produced by `endpoint_to_center()`.
        delta : float
            The signed parametric sweep (in radians) from start to end.
            Positive values sweep in the direction of increasing angles,
            which is clockwise on screen since the y-axis points down.
        start, end : complex, optional
            The endpoints, if known.  Otherwise they are evaluated from the
            parameters above.
        """
        self.center = center
        self.radius = radius
        self.phi = phi
        self.theta1 = theta1
        self.delta = delta
        self.start = self.point(theta1) if start is None else start
        self.end = self.point(theta1 + delta) if end is None else end

    def __repr__(self):
        params = (self.center, self.radius, self.phi, self.theta1, self.delta)
        return ("CenterArc(center={}, radius={}, phi={}, theta1={}, "
                "delta={})".format(*params))

    @property
    def theta2(self):
        return self.theta1 + self.delta

    @property
    def rotation(self):
        """The ellipse rotation in degrees."""
        return degrees(self.phi)

    @property
    def anticlockwise(self):
        return self.delta < 0

    def point(self, theta):
        """returns the point of the ellipse at parametric angle `theta`."""
        rx = self.radius.real
        ry = self.radius.imag
        return rotate(rx*cos(theta) + 1j*ry*sin(theta), self.phi) + \
            self.center


def endpoint_to_center(start, radius, rotation, large_arc, sweep, end,
                       autoscale_radius=AUTOSCALE_RADIUS):
    """Converts an SVG-style (endpoint parameterized) elliptical arc to a
    `CenterArc`.

    `radius` is rx + 1j*ry (signs are dropped), `rotation` is in degrees and
    the two flags are coerced to booleans.  The radii of the returned arc are
    scaled up (preserving their ratio) if the endpoints cannot be joined with
    the requested radii.  Arcs with a zero radius or coincident endpoints
    have no center parameterization; callers should treat them as a line or
    as nothing at all."""
    if start == end:
        raise ValueError("An arc with coincident endpoints has no center.")
    rx = abs(radius.real)
    ry = abs(radius.imag)
    if rx == 0 or ry == 0:
        raise ValueError("An arc with a zero radius is a straight line.")
    large_arc = bool(large_arc)
    sweep = bool(sweep)

    phi = radians(rotation)
    rot_matrix = exp(1j*phi)

    # Transform z -> z' = x' + 1j*y' = rot_matrix**(-1)*(z - (end+start)/2).
    # This sends the midpoint of the chord to the origin, lines the ellipse
    # axes up with the coordinate axes and sends end to -start.
    zp1 = (start - end)/2/rot_matrix
    x1p, y1p = zp1.real, zp1.imag
    x1p_sqd = x1p*x1p
    y1p_sqd = y1p*y1p

    # Correct out of range radii
    radius_check = x1p_sqd/(rx*rx) + y1p_sqd/(ry*ry)
    if radius_check > 1:
        if not autoscale_radius:
            raise ValueError("No such elliptic arc exists.")
        rx *= sqrt(radius_check)
        ry *= sqrt(radius_check)
        # the chord is now a diameter
        cp = 0j
    else:
        # Solve the two quadratics given by plugging (x1', y1') and
        # (-x1', -y1') into (x'-cx')**2/rx**2 + (y'-cy')**2/ry**2 = 1
        rx_sqd = rx*rx
        ry_sqd = ry*ry
        tmp = rx_sqd*y1p_sqd + ry_sqd*x1p_sqd
        radicand = (rx_sqd*ry_sqd - tmp)/tmp
        radical = sqrt(max(radicand, 0))
        if large_arc == sweep:
            radical = -radical
        cp = radical*(rx*y1p/ry - 1j*ry*x1p/rx)

    center = rot_matrix*cp + (start + end)/2

    # Send the ellipse to the unit circle centered at the origin
    u1 = complex((x1p - cp.real)/rx, (y1p - cp.imag)/ry)
    u2 = complex((-x1p - cp.real)/rx, (-y1p - cp.imag)/ry)

    theta1 = angle_between(1 + 0j, u1)
    delta = angle_between(u1, u2)
    if sweep and delta < 0:
        delta += TWO_PI
    elif not sweep and delta > 0:
        delta -= TWO_PI

    return CenterArc(center, rx + 1j*ry, phi, theta1, delta,
                     start=start, end=end)


def normalize_sweep(start_angle, end_angle, anticlockwise):
    """returns the signed sweep (in radians) that the canvas `ellipse()`
    primitive draws between the two angles.  A sweep of a full turn or
    more is clipped to exactly one turn."""
    if not anticlockwise:
        if end_angle - start_angle >= TWO_PI:
            return TWO_PI
        return (end_angle - start_angle) % TWO_PI
    if start_angle - end_angle >= TWO_PI:
        return -TWO_PI
    return -((start_angle - end_angle) % TWO_PI)


def center_to_endpoint(center, radius, phi, start_angle, end_angle,
                       anticlockwise):
    """Converts a canvas-style (center parameterized) elliptical arc into
    SVG `A` command parameters.

    Returns the start point and a list of
    (radius, rotation_degrees, large_arc, sweep, end) tuples.  A full turn
    is split in two since an SVG arc cannot start and end at the same
    point; a zero sweep gives an empty list."""
    delta = normalize_sweep(start_angle, end_angle, anticlockwise)
    arc = CenterArc(center, radius, phi, start_angle, delta)
    rotation = degrees(phi)
    sweep = delta > 0

    if delta == 0:
        return arc.start, []
    if isclose(abs(delta), TWO_PI):
        middle = arc.point(start_angle + delta/2)
        return arc.start, [(radius, rotation, False, sweep, middle),
                           (radius, rotation, False, sweep, arc.start)]
    return arc.start, [(radius, rotation, abs(delta) > pi, sweep, arc.end)]
