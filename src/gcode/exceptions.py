class GCodeError(Exception):
    """Base error for everything raised by gcode."""


class InvalidIndex(GCodeError, ValueError):
    """Spiral index below 1."""


class InvalidEncoding(GCodeError, ValueError):
    """Malformed numeral, unknown word or unusable base."""


class InvalidLanguage(GCodeError, LookupError):
    """No word set registered for the language."""


class InvalidRegionLevel(GCodeError, ValueError):
    """Region level not supported by the lookup."""


class RegionNotFound(GCodeError, LookupError):
    """No region could anchor the code."""


class ConnectionError(GCodeError):
    """Could not reach the reference data server."""


class NotFoundError(GCodeError):
    """Reference table missing on the server (404)."""


class ServerError(GCodeError):
    """Reference data server failed (500)."""
