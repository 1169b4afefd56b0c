"""This submodule contains the `Style` record, the set of drawing attributes
a `PathCanvas` hands to its surface when filling or stroking."""

# External dependencies
from collections import namedtuple

# Internal dependencies
from .errors import UnknownAttributeError
from .misctools import rgb2hex


LINE_CAPS = ('butt', 'round', 'square')
LINE_JOINS = ('miter', 'round', 'bevel')

_STYLE_FIELDS = ('fill_style', 'stroke_style', 'line_width', 'line_cap',
                 'line_join', 'miter_limit', 'global_alpha')


def _color(value):
    if isinstance(value, (tuple, list)):
        return rgb2hex(value)
    return value


class Style(namedtuple('Style', _STYLE_FIELDS)):
    """An immutable set of drawing attributes.  The defaults are those of
    a fresh 2D canvas context."""
    __slots__ = ()

    def __new__(cls, fill_style='#000000', stroke_style='#000000',
                line_width=1.0, line_cap='butt', line_join='miter',
                miter_limit=10.0, global_alpha=1.0):
        if line_cap not in LINE_CAPS:
            raise ValueError("Unsupported line cap: {}".format(line_cap))
        if line_join not in LINE_JOINS:
            raise ValueError("Unsupported line join: {}".format(line_join))
        if not 0 <= global_alpha <= 1:
            raise ValueError("global_alpha must lie between 0 and 1.")
        if line_width <= 0 or miter_limit <= 0:
            raise ValueError("line_width and miter_limit must be positive.")
        return super(Style, cls).__new__(
            cls, _color(fill_style), _color(stroke_style), float(line_width),
            line_cap, line_join, float(miter_limit), float(global_alpha))

    def updated(self, **attributes):
        """returns a copy of this style with the given attributes replaced.
        Names other than the fields of `Style` are rejected."""
        unknown = set(attributes) - set(self._fields)
        if unknown:
            raise UnknownAttributeError(
                "Unknown style attribute(s): {}".format(
                    ', '.join(sorted(unknown))))
        values = self._asdict()
        values.update(attributes)
        return Style(**values)

    def svg_attributes(self):
        """returns the SVG presentation attributes equivalent to this style,
        keyed the way svgwrite expects them."""
        return {'stroke_width': self.line_width,
                'stroke_linecap': self.line_cap,
                'stroke_linejoin': self.line_join,
                'stroke_miterlimit': self.miter_limit,
                'opacity': self.global_alpha}
