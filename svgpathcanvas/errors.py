"""Exceptions raised while building paths.

All path errors derive from `PathError`, itself a `ValueError`, so callers
that only care about bad input can catch `ValueError`."""


class PathError(ValueError):
    pass


class NoCurrentPointError(PathError):
    """A command needed a current point but no subpath is open."""

    def __init__(self, msg="No current point; can't use relative coordinates"):
        super(NoCurrentPointError, self).__init__(msg)


class NoSmoothContextError(PathError):
    """A smooth curve command did not follow a curve of the same kind."""


class ArgumentCountError(PathError):
    """A command got a number of arguments it cannot group."""


class MalformedPathError(PathError):
    """A path d-string could not be tokenized."""


class UnknownAttributeError(AttributeError):
    """A style attribute name is not one of the recognized fields."""
