"""Similarity configuration and lookup errors.

Construction-time errors derive from SimilarityConfigError (a ValueError, like every other
bad-configuration error in the service) and abort building a SimilarityLookupService.
UnknownSimilarityError is raised by lookups of names that were never declared.
"""

from typing import Any


class SimilarityError(Exception):
    """Base class for similarity resolution errors."""

    error_code = "similarity_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"error_code": self.error_code, "message": self.message}


class SimilarityConfigError(SimilarityError, ValueError):
    """A similarity definition could not be built."""

    error_code = "similarity_config_error"


class UnknownStrategyTypeError(SimilarityConfigError):
    error_code = "unknown_similarity_type"

    def __init__(self, name: str, type_name: str) -> None:
        super().__init__(f"Unknown similarity type {type_name!r} for similarity [{name}]")
        self.name = name
        self.type_name = type_name


class MissingParameterError(SimilarityConfigError):
    error_code = "missing_parameter"

    def __init__(self, scope: str, key: str) -> None:
        super().__init__(f"Similarity [{scope}] requires parameter {key!r}")
        self.scope = scope
        self.key = key


class ParameterTypeError(SimilarityConfigError):
    error_code = "parameter_type_error"

    def __init__(self, scope: str, key: str, value: Any, expected_type: type) -> None:
        super().__init__(
            f"Similarity [{scope}] parameter {key!r}: cannot read {value!r} as {expected_type.__name__}"
        )
        self.scope = scope
        self.key = key
        self.value = value
        self.expected_type = expected_type


class ParameterRangeError(SimilarityConfigError):
    error_code = "parameter_range_error"

    def __init__(self, scope: str, key: str, value: Any, domain: str) -> None:
        super().__init__(f"Similarity [{scope}] parameter {key!r}={value!r} must be {domain}")
        self.scope = scope
        self.key = key
        self.value = value
        self.domain = domain


class UnknownSubModelError(SimilarityConfigError):
    error_code = "unknown_sub_model"

    def __init__(self, axis: str, code: str, scope: str | None = None) -> None:
        where = f" for similarity [{scope}]" if scope else ""
        super().__init__(f"Unsupported {axis} [{code}]{where}")
        self.axis = axis
        self.code = code
        self.scope = scope


class UnknownSimilarityError(SimilarityError, LookupError):
    error_code = "unknown_similarity"

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown similarity [{name}]")
        self.name = name
