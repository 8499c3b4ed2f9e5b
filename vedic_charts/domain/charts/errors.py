class ChartError(Exception):
    """
    Base exception for all chart-related domain errors.
    """
    pass


class InvalidBirthDataError(ChartError):
    """
    Raised when birth inputs are invalid or inconsistent.
    """
    pass


class ProviderError(ChartError):
    """
    Raised when the ephemeris provider fails to deliver data.
    """
    pass


class MissingAscendantError(ChartError):
    """
    Raised when the provider response carries no ascendant.
    """
    pass
