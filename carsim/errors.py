class CarSimError(Exception):
    """Base class for carsim errors."""


class ConfigError(CarSimError):
    """Raised when a YAML config holds values the simulation cannot use."""


class NoStrategyError(CarSimError):
    """Raised when a DirectionContext is executed before a strategy was set."""
