"""Error taxonomy for the solarcast core."""


class SolarcastError(Exception):
    """Base class for all solarcast errors."""


class ValidationError(SolarcastError, ValueError):
    """Malformed or out-of-range coordinates."""


class DataUnavailableError(SolarcastError):
    """The provider returned no usable series for the request."""


class AggregationError(DataUnavailableError):
    """A reduction was asked to run over an empty series."""
