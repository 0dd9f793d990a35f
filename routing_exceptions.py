"""
Routing Exceptions

Exception classes for connector routing, allowing the library to report
errors through exceptions and leaving sys.exit() to the command line tools.
"""


class RoutingError(Exception):
    """Base exception for all routing errors."""
    pass


class ConfigurationError(RoutingError):
    """Raised when the routing configuration is invalid."""
    pass


class InputFileError(RoutingError):
    """Raised when a scene or routes file cannot be read or parsed."""
    pass


class OutputFileError(RoutingError):
    """Raised when an output file cannot be written."""
    pass


class ShapeNotFoundError(RoutingError):
    """Raised when a connector references a shape id the scene does not define."""

    def __init__(self, shape_id: str, message: str = ""):
        self.shape_id = shape_id
        super().__init__(message or f"Shape not found: {shape_id}")
