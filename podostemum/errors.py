"""
Error types for the Podostemum biomass model

Invalid (physically impossible) inputs abort a single computation with a
DomainError. Unrealistic but possible inputs are reported as log warnings
by the module that detects them and never raise.
"""


class DomainError(ValueError):
    """
    Raised when an input lies outside its physical domain.

    Attributes:
        parameter (str): Name of the offending parameter (optional)
        value: The value that was supplied (optional)
    """

    def __init__(self, message, parameter=None, value=None):
        self.parameter = parameter
        self.value = value
        super().__init__(message)


class ModelSpecificationError(DomainError):
    """Raised when a model variant ("type") is not one of the accepted values."""

    def __init__(self, model_type, accepted):
        self.accepted = tuple(accepted)
        message = (
            f"Invalid model specification: type={model_type!r}, "
            f"expected one of {list(self.accepted)}"
        )
        super().__init__(message, parameter="model_type", value=model_type)
