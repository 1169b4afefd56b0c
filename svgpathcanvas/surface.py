"""This submodule contains the interface a `PathCanvas` draws on, and a
surface that simply records what it is asked to draw."""


class DrawingSurface(object):
    """The primitive operations of a 2D drawing context.

    A `PathCanvas` tracks the path state itself and only ever asks its
    surface for these primitives.  Angles are always in radians here.
    Subclasses implement the primitives they support; the others raise
    NotImplementedError."""

    def begin_path(self):
        raise NotImplementedError

    def move_to(self, x, y):
        raise NotImplementedError

    def line_to(self, x, y):
        raise NotImplementedError

    def bezier_curve_to(self, c1x, c1y, c2x, c2y, x, y):
        raise NotImplementedError

    def quadratic_curve_to(self, cx, cy, x, y):
        raise NotImplementedError

    def ellipse(self, cx, cy, rx, ry, rotation, start_angle, end_angle,
                anticlockwise):
        """Adds an elliptical arc, preceded by a straight line from the
        current point to the start of the arc if there is a current point."""
        raise NotImplementedError

    def close_path(self):
        raise NotImplementedError

    def save(self):
        raise NotImplementedError

    def restore(self):
        raise NotImplementedError

    def fill(self, style):
        raise NotImplementedError

    def stroke(self, style):
        raise NotImplementedError

    def translate(self, dx, dy):
        raise NotImplementedError

    def scale(self, sx, sy):
        raise NotImplementedError

    def rotate(self, angle):
        raise NotImplementedError

    def transform(self, a, b, c, d, e, f):
        raise NotImplementedError

    def set_transform(self, a, b, c, d, e, f):
        raise NotImplementedError

    def reset(self):
        raise NotImplementedError


def _recorder(name):
    def record(self, *args):
        self.calls.append((name, args))
    record.__name__ = name
    record.__doc__ = "Records a call to {}().".format(name)
    return record


class RecordingSurface(DrawingSurface):
    """A display list.  Every primitive call is appended to `calls` as a
    (name, args) tuple, e.g. ('line_to', (10.0, 0.0))."""

    def __init__(self):
        self.calls = []

    def __repr__(self):
        return 'RecordingSurface({} calls)'.format(len(self.calls))

    def names(self):
        """returns the names of the recorded calls, in order."""
        return [name for name, _ in self.calls]

    def replay(self, surface):
        """Issues the recorded calls, in order, to another surface."""
        for name, args in self.calls:
            getattr(surface, name)(*args)

    def reset(self):
        self.calls = []

    begin_path = _recorder('begin_path')
    move_to = _recorder('move_to')
    line_to = _recorder('line_to')
    bezier_curve_to = _recorder('bezier_curve_to')
    quadratic_curve_to = _recorder('quadratic_curve_to')
    ellipse = _recorder('ellipse')
    close_path = _recorder('close_path')
    save = _recorder('save')
    restore = _recorder('restore')
    fill = _recorder('fill')
    stroke = _recorder('stroke')
    translate = _recorder('translate')
    scale = _recorder('scale')
    rotate = _recorder('rotate')
    transform = _recorder('transform')
    set_transform = _recorder('set_transform')
