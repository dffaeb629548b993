"""Domain errors for route selection and pricing."""


class RouteError(Exception):
    """Base class for every route selection failure."""


class InvalidCoordinate(RouteError, ValueError):
    """Latitude or longitude outside the valid range, or not a finite number."""


class MissingPoint(RouteError):
    """Distance or price requested before both pickup and drop-off are known."""


class LocationUnavailable(RouteError):
    """The position provider denied, failed, or returned nothing usable."""
