"""Exception hierarchy for hexlattice."""


class HexLatticeError(Exception):
    """Base exception for all hexlattice errors."""

    pass


class InvalidArgumentError(HexLatticeError, ValueError):
    """Raised when a radius, distance or source set is out of range."""

    pass


class ConfigurationError(HexLatticeError):
    """Raised when a configuration file cannot be read or validated."""

    pass
