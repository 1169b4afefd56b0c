"""This submodule contains the tokenizer for SVG path d-strings.  It turns a
d-string into (Command, arguments) elements; `PathCanvas.svgpath()` replays
those elements as canvas commands."""

# External dependencies
import re
from math import isfinite
from enum import Enum

# Internal dependencies
from .errors import MalformedPathError


class Command(Enum):
    """The twenty SVG path commands, keyed by their letter."""
    MOVETO = 'M'
    RMOVETO = 'm'
    LINETO = 'L'
    RLINETO = 'l'
    HLINETO = 'H'
    RHLINETO = 'h'
    VLINETO = 'V'
    RVLINETO = 'v'
    CURVETO = 'C'
    RCURVETO = 'c'
    SMOOTH_CURVETO = 'S'
    RSMOOTH_CURVETO = 's'
    QUADTO = 'Q'
    RQUADTO = 'q'
    SMOOTH_QUADTO = 'T'
    RSMOOTH_QUADTO = 't'
    ARCTO = 'A'
    RARCTO = 'a'
    CLOSEPATH = 'Z'
    RCLOSEPATH = 'z'

    @property
    def letter(self):
        return self.value

    @property
    def relative(self):
        return self.value.islower()

    @property
    def group_size(self):
        """The number of arguments one repetition of the command takes."""
        return GROUP_SIZES[self.value.upper()]


GROUP_SIZES = {'M': 2, 'L': 2, 'H': 1, 'V': 1, 'C': 6, 'S': 4, 'Q': 4,
               'T': 2, 'A': 7, 'Z': 0}

COMMAND_RE = re.compile("([MmZzLlHhVvCcSsQqTtAa])")
# ASCII only: \d and \s must not match other Unicode digits and spaces
FLOAT_RE = re.compile(r"[+-]?(?:\.\d+|\d+\.\d*|\d+)(?:[eE][+-]?\d+)?",
                      re.ASCII)
SEPARATOR_RE = re.compile(r"^[\s,]*$", re.ASCII)


def _check_separators(text, pathdef):
    # whatever is left once the numbers are gone must be whitespace/commas
    leftover = FLOAT_RE.sub(' ', text)
    if not SEPARATOR_RE.match(leftover):
        raise MalformedPathError(
            "Unexpected characters {!r} in path {!r}".format(
                leftover.strip(' ,'), pathdef))


def tokenize_path(pathdef):
    """Yields (Command, numbers) pairs for each element of the d-string
    `pathdef`, where numbers is a tuple of floats.  The argument counts are
    not checked here; that is up to the command that receives them."""
    chunks = COMMAND_RE.split(pathdef)

    # split() puts whatever precedes the first command letter in chunks[0]
    if chunks[0].strip(' \t\r\n\f,'):
        _check_separators(chunks[0], pathdef)
        raise MalformedPathError(
            "Path {!r} must begin with a command".format(pathdef))
    if len(chunks) == 1:
        raise MalformedPathError("Bad path: {!r}".format(pathdef))

    for letter, args in zip(chunks[1::2], chunks[2::2]):
        _check_separators(args, pathdef)
        numbers = tuple(float(x) for x in FLOAT_RE.findall(args))
        if not all(isfinite(x) for x in numbers):
            raise MalformedPathError(
                "Number out of range in path {!r}".format(pathdef))
        yield Command(letter), numbers


def parse_path(pathdef):
    """returns the list of (Command, numbers) elements of `pathdef`."""
    return list(tokenize_path(pathdef))
