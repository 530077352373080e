class AnalysisError(ValueError):
    """Base class for errors raised before a report is computed."""


class InvalidInputError(AnalysisError):
    """Sales data is missing or structurally unusable."""


class InvalidOptionsError(AnalysisError):
    """Analysis options are missing or a policy is not callable."""
