"""
Field Reader

Prompts for a field, reads a bounded line and re-prompts until every
validator attached to the field accepts the value.

State machine per field:
    Prompting -> Reading -> Validating -> Accepted
                                       -> Rejected -> Prompting
"""

import logging
from typing import Dict, List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from agenda.exceptions import FieldEntryAborted
from agenda.interface.console import Console
from agenda.logic.messages import ERROR_PREFIX, error_message
from agenda.logic.validators.base import BaseValidator, ValidationError

logger = logging.getLogger(__name__)


class FieldBuffer(BaseModel):
    """
    Caller-owned holder for one field value.

    The value never exceeds max_length - 1 characters; one slot of the
    declared capacity is reserved, matching the line reader's bound.
    """

    model_config = ConfigDict(validate_assignment=True)

    max_length: int = Field(..., ge=1, description="Declared capacity of the field")
    value: str = Field("", description="Current field contents")

    @field_validator("value")
    @classmethod
    def check_capacity(cls, value: str, info: ValidationInfo) -> str:
        max_length = info.data.get("max_length")
        if max_length is not None and len(value) > max_length - 1:
            raise ValueError(f"Value of {len(value)} characters exceeds capacity {max_length}")
        return value


class FieldSpec(BaseModel):
    """A labelled field and the ordered validators gating it."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    label: str
    max_length: int = Field(..., ge=1)
    validators: List[BaseValidator] = Field(default_factory=list)


def run_validators(value: str, validators: Sequence[BaseValidator]) -> ValidationError:
    """
    Apply validators in order and stop at the first failure.

    Returns:
        The first non-NO_ERROR code, or NO_ERROR if all validators pass.
    """
    for validator in validators:
        status = validator.validate(value)
        if status:
            logger.debug(f"{validator!r} rejected {value!r}: {status.name}")
            return status
    return ValidationError.NO_ERROR


def show_error_message(code: ValidationError, console: Console):
    """Print the diagnostic for a failed validation."""
    console.write(ERROR_PREFIX)
    console.writeln(error_message(code), fg="red")


def read_field(
    buffer: FieldBuffer,
    label: str,
    max_length: Optional[int] = None,
    validators: Sequence[BaseValidator] = (),
    console: Optional[Console] = None,
) -> str:
    """
    Read a field value from the keyboard, re-prompting until it is valid.

    An empty line keeps whatever the buffer held before the prompt, so a
    pre-filled buffer acts as the default. There is no retry limit.

    Args:
        buffer: Caller-owned buffer; holds the accepted value on return
        label: Field name shown in the prompt
        max_length: Field capacity; defaults to the buffer's and never
            exceeds it
        validators: Checks applied in order, first failure wins
        console: Terminal to use; defaults to the process terminal

    Returns:
        The accepted value (also stored in buffer.value)

    Raises:
        FieldEntryAborted: If input ends before a value is accepted
    """
    console = console or Console()
    capacity = buffer.max_length if max_length is None else min(max_length, buffer.max_length)

    while True:
        console.write(f"{label}: ")

        default_value = buffer.value
        line = console.readline(capacity)
        if line is None:
            console.writeln()
            logger.warning(f"Input ended while reading '{label}'")
            raise FieldEntryAborted(label)

        value = line or default_value
        status = run_validators(value, validators)
        buffer.value = value
        if not status:
            logger.debug(f"Accepted '{label}'")
            return value

        show_error_message(status, console)


def read_form(
    form: Sequence[FieldSpec],
    console: Optional[Console] = None,
    defaults: Optional[Dict[str, str]] = None,
) -> Dict[str, str]:
    """
    Read every field of a form in order.

    Args:
        form: Field specifications in prompt order
        console: Terminal to use
        defaults: Optional pre-filled values by field name

    Returns:
        Dict of field name -> accepted value
    """
    console = console or Console()
    defaults = defaults or {}
    values = {}

    for spec in form:
        buffer = FieldBuffer(max_length=spec.max_length, value=defaults.get(spec.name, ""))
        values[spec.name] = read_field(buffer, spec.label, spec.max_length, spec.validators, console)

    logger.info(f"Collected {len(values)} fields")
    return values
