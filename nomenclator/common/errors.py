"""Domain errors and failure typing."""


class NomenclatorError(Exception):
    """Base class for album titling failures."""

    error_code = "NOMENCLATOR_ERROR"


class ConfigError(NomenclatorError):
    """Raised for invalid or missing configuration."""

    error_code = "CONFIG_ERROR"


class InputError(NomenclatorError):
    """Raised when the photo metadata source cannot be read."""

    error_code = "INPUT_ERROR"


class ParseError(NomenclatorError):
    """Raised for malformed or missing row fields."""

    error_code = "PARSE_ERROR"


class ResolverError(NomenclatorError):
    """Raised when a place or weather lookup fails for a row."""

    error_code = "RESOLVER_ERROR"

    def __init__(self, resolver: str, message: str) -> None:
        super().__init__(f"{resolver} lookup failed: {message}")
        self.resolver = resolver


class EmptyResultError(NomenclatorError):
    """Raised when no row was enriched and no title can be produced."""

    error_code = "EMPTY_RESULT"
