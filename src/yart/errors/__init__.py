"""Outcome types and their error channels.

- Error: Optional-message descriptor attached to a failure
- Outcome/TypedOutcome/Ok/Failure: Explicit success/failure values
- ContractViolation/InvalidStateError/InvalidCastError: API misuse, raised never returned
"""

from .errors import ContractViolation, InvalidCastError, InvalidStateError
from .result import Failure, Ok, Outcome, TypedOutcome
from .types import Error

__all__ = [
    # Descriptor
    "Error",
    # Outcomes
    "Outcome", "TypedOutcome", "Ok", "Failure",
    # Contract violations
    "ContractViolation", "InvalidStateError", "InvalidCastError",
]
