from typing import Optional


class GenerationError(Exception):
    """Base class for failures that abort a generation run."""


class ConfigurationError(GenerationError):
    """The engine could not build a context from a definition string.

    The engine raises it with the definition and a ``reason``; the driver
    re-raises it naming the context role (source or target) and, for targets,
    the projection.
    """

    def __init__(
        self,
        definition: str,
        reason: str = "",
        role: Optional[str] = None,
        projection: Optional[str] = None,
    ):
        self.definition = definition
        self.reason = reason
        self.role = role
        self.projection = projection
        if role is None:
            message = f"invalid definition: {definition}"
        elif projection is None:
            message = f"could not init {role} context: {definition}"
        else:
            message = f"could not init {role} projection {projection}: {definition}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TransformError(GenerationError):
    """A forward or inverse call failed or returned non-finite values.

    Same two-stage pattern as ConfigurationError: the engine supplies the
    ``reason``, the driver adds projection, direction and input coordinates.
    """

    def __init__(
        self,
        reason: str,
        projection: Optional[str] = None,
        direction: Optional[str] = None,
        x: Optional[float] = None,
        y: Optional[float] = None,
    ):
        self.reason = reason
        self.projection = projection
        self.direction = direction
        self.x = x
        self.y = y
        if projection is None:
            message = reason
        else:
            message = f"{direction} transform failed for {projection} at ({x!r}, {y!r}): {reason}"
        super().__init__(message)


class SettingsError(GenerationError, ValueError):
    """An environment setting could not be parsed."""
