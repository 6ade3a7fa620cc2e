"""Custom exceptions for deskbird-spatial package."""


class DeskbirdSpatialError(Exception):
    """Base exception for all deskbird-spatial errors."""

    pass


class ParseError(DeskbirdSpatialError):
    """Raised when a payload cannot be parsed."""

    pass


class MalformedFloorConfig(ParseError):
    """Raised when floor configuration JSON is unparsable or lacks an areas array."""

    pass


class MalformedAvailability(ParseError):
    """Raised when a zone availability payload is unparsable or incomplete."""

    pass


class IndexBuildError(DeskbirdSpatialError):
    """Base exception for errors while building a lookup index."""

    pass


class DuplicateIdentifier(IndexBuildError):
    """Raised when two entries share an identifier that must be unique.

    Attributes:
        kind: Identifier space that collided (e.g. 'desk_number', 'id', 'zone_id', 'order')
        value: The duplicated value
    """

    def __init__(self, kind: str, value, message: str | None = None):
        self.kind = kind
        self.value = value
        super().__init__(message or f"Duplicate {kind}: {value!r}")


class DeskNotFound(DeskbirdSpatialError):
    """Raised when a requested desk has no match in the loaded floor plan."""

    def __init__(self, desk_id, message: str | None = None):
        self.desk_id = desk_id
        super().__init__(message or f"Desk {desk_id} not found - check the desk number")


class ValidationError(DeskbirdSpatialError):
    """Raised when query arguments or settings fail validation."""

    pass
