"""
Base Validator

Result codes and the abstract base class for all field validators.
"""

from abc import ABC, abstractmethod
from enum import IntEnum


class ValidationError(IntEnum):
    """
    Outcome of a single validation.

    NO_ERROR is zero so a successful result is falsy; every other member
    selects exactly one user-facing message.
    """

    NO_ERROR = 0
    INVALID_STRING = 1
    MISSING_REQUIRED = 2
    NOT_POSITIVE = 3
    INVALID_EMAIL = 4
    INVALID_PHONE = 5
    INVALID_NATIONAL_ID = 6
    INVALID_ORG_ID = 7
    INVALID_DATE = 8
    INVALID_NUMBER = 9
    INVALID_TIME = 10


class BaseValidator(ABC):
    """
    Abstract base class for field validators.

    Subclasses implement check(), a side-effect-free predicate, and set
    error_code to the code reported when the predicate fails.
    """

    error_code: ValidationError

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        if getattr(cls.check, "__isabstractmethod__", False):
            return
        if not getattr(cls, "error_code", ValidationError.NO_ERROR):
            raise TypeError(f"{cls.__name__} must set a failing error_code")

    @abstractmethod
    def check(self, value: str) -> bool:
        """
        Decide whether a field value satisfies the rule.

        Args:
            value: The candidate text

        Returns:
            True if the value is acceptable. Never raises.
        """
        pass

    def validate(self, value: str) -> ValidationError:
        """Classify a value as NO_ERROR or this validator's error code."""
        if self.check(value):
            return ValidationError.NO_ERROR
        return self.error_code

    def __call__(self, value: str) -> ValidationError:
        return self.validate(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
