"""Exception types raised by the print estimator."""


class EstimatorError(Exception):
    """Base class for all estimator errors."""


class InvalidInputError(EstimatorError, ValueError):
    """A printer or part field is non-numeric, non-finite, or out of range."""


class ZeroFlowRateError(InvalidInputError):
    """A flow rate evaluated to zero while there is material to deposit."""


class ConfigError(EstimatorError):
    """Preset file or override problem (missing file, bad JSON, unknown field)."""


class UnknownPresetError(ConfigError, KeyError):
    """No preset is registered under the requested label."""

    def __str__(self) -> str:
        # KeyError.__str__ quotes its argument
        return str(self.args[0]) if self.args else ""
