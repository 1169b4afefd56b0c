"""This submodule contains the small amount of plane geometry the rest of
svgpathcanvas is built on.
Note:  Points and vectors are represented by complex numbers, x + 1j*y."""

# External dependencies
from math import acos, pi
from cmath import exp
import numpy as np


RADIANS = 'radians'
DEGREES = 'degrees'
ANGLE_UNITS = (RADIANS, DEGREES)


def clamp(x, lo, hi):
    """returns x clipped to the closed interval [lo, hi]."""
    return float(np.clip(x, lo, hi))


def to_radians(angle, unit):
    """Converts `angle`, measured in `unit`, to radians."""
    if unit == RADIANS:
        return angle
    elif unit == DEGREES:
        return angle*pi/180
    raise ValueError("Unsupported angle unit: {}".format(unit))


def angle_between(u, v):
    """Returns the signed angle (in radians, between -pi and pi) that takes
    the direction of vector u to the direction of vector v.

    The sign is that of the cross product u x v, so with the y-axis pointing
    down (as on a canvas) positive angles turn clockwise.
    See http://www.w3.org/TR/SVG/implnote.html#ArcConversionEndpointToCenter
    """
    dot = u.real*v.real + u.imag*v.imag
    cross = u.real*v.imag - u.imag*v.real

    # Rounding errors can push the cosine slightly outside of [-1, 1]
    cosine = clamp(dot/(abs(u)*abs(v)), -1, 1)
    angle = acos(cosine)
    if cross >= 0:
        return angle
    return -angle


def rotate(z, angle, origin=0j):
    """Rotates the point z by `angle` radians about `origin`."""
    return exp(1j*angle)*(z - origin) + origin


def unit_vector(z):
    """returns z/|z|."""
    length = abs(z)
    if length == 0:
        raise ValueError("The zero vector has no direction.")
    return z/length
