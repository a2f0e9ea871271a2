"""Marker base for immutable, attribute-compared domain values."""


class ValueObject:
    """
    Base for values such as ids.

    Subclasses are ``@dataclass(frozen=True)``: the dataclass machinery
    provides attribute equality, hashing and repr, and ``__post_init__``
    checks the value.
    """

    __slots__ = ()
