# partialize/exceptions.py

"""Errors raised while splitting a document into partials."""


class PartializeError(Exception):
    """Base class for all partialize errors."""


class ParseError(PartializeError):
    """The parser rejected the input; the whole document is aborted."""


class RenderError(PartializeError):
    """Serializing one candidate subtree failed."""


class IncludeCycleError(PartializeError):
    """Partials include each other in a cycle and cannot be inlined."""


class MissingPartialError(PartializeError):
    """An include directive names a partial that does not exist."""

    def __init__(self, name: str):
        super().__init__(f"Include references unknown partial '{name}'")
        self.name = name
