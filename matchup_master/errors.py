"""Exception types raised by MatchupMaster."""


class MatchupMasterError(Exception):
    """Base class for all MatchupMaster errors."""


class DataFormatError(MatchupMasterError):
    """Raised when a catalog, stat table or asset cannot be parsed."""


class UnitNotFound(MatchupMasterError, KeyError):
    """Raised when an unknown unit name is queried."""

    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"No such unit: {self.name!r}"


class IncompleteSelection(MatchupMasterError):
    """Raised when a strategy is requested with an empty side."""


class GenerationError(MatchupMasterError):
    """Raised when the text-generation service fails."""


class MalformedResponse(GenerationError):
    """Raised when a generation succeeds but carries no usable narrative."""
