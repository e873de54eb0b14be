"""Exceptions raised by the team mixer."""


class InvalidArgument(ValueError):
    """An argument passed to a team operation is out of range or unknown."""
