"""This submodule contains `PathState`, the bookkeeping a `PathCanvas` keeps
about the path under construction, and `GraphicsSnapshot`, the value its
save()/restore() stack holds."""

# External dependencies
from collections import namedtuple

# Internal dependencies
from .errors import NoCurrentPointError
from .geometry import RADIANS, ANGLE_UNITS


# Everything a canvas saves alongside the surface's own graphics state.
GraphicsSnapshot = namedtuple('GraphicsSnapshot', ['angle_unit', 'style'])


class PathState(object):
    """The current point, the start of the current subpath and the last
    control points of the path being built.

    Invariants:  `current` is None exactly when no subpath is open, and
    the two control point fields are only set right after the curve
    command that produced them."""

    def __init__(self, angle_unit=RADIANS):
        self.angle_unit = angle_unit
        self.reset()

    def __repr__(self):
        return ("PathState(current={}, subpath_start={}, "
                "last_cubic_control={}, last_quadratic_control={}, "
                "angle_unit={!r})".format(
                    self.current, self.subpath_start,
                    self.last_cubic_control, self.last_quadratic_control,
                    self.angle_unit))

    def _fields(self):
        return (self.current, self.subpath_start, self.last_cubic_control,
                self.last_quadratic_control, self.angle_unit)

    def __eq__(self, other):
        if not isinstance(other, PathState):
            return NotImplemented
        return self._fields() == other._fields()

    def __ne__(self, other):
        if not isinstance(other, PathState):
            return NotImplemented
        return not self == other

    @property
    def angle_unit(self):
        return self._angle_unit

    @angle_unit.setter
    def angle_unit(self, unit):
        if unit not in ANGLE_UNITS:
            raise ValueError("Unsupported angle unit: {}".format(unit))
        self._angle_unit = unit

    @property
    def is_open(self):
        return self.current is not None

    def reset(self):
        """Forgets the path (as after beginPath())."""
        self.current = None
        self.subpath_start = None
        self.last_cubic_control = None
        self.last_quadratic_control = None

    # A coordinate transform leaves the stored points in the wrong space
    invalidate = reset

    def require_current(self):
        """returns the current point, raising NoCurrentPointError if there
        is none."""
        if self.current is None:
            raise NoCurrentPointError()
        return self.current

    def set_current(self, point):
        self.current = point
        self.last_cubic_control = None
        self.last_quadratic_control = None

    def open(self, point):
        """Starts a new subpath at `point`."""
        self.set_current(point)
        self.subpath_start = point

    def ensure_open_at(self, point):
        """returns True if a subpath had to be opened at `point`."""
        if self.current is None:
            self.open(point)
            return True
        return False
