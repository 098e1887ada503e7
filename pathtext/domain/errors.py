"""Domain errors."""


class PathTextError(Exception):
    """Base path text error."""


class InvalidSeparatorError(PathTextError):
    """Separator argument is not a single character."""
