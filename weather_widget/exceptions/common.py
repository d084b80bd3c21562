class WeatherWidgetException(Exception):
    """Base exception for the weather widget."""
    def __init__(self, message: str):
        super().__init__(message)


class ExternalAPIException(WeatherWidgetException):
    """Raised when a call to a remote weather or geocoding API fails."""


class MalformedResponseException(ExternalAPIException):
    """Raised when a remote API answers with a body missing expected fields."""


class ValidationError(WeatherWidgetException):
    """Raised when user input fails validation."""
