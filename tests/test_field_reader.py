"""Tests for the interactive field reader."""

import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

import pytest

from agenda.exceptions import FieldEntryAborted
from agenda.interface.field_reader import (
    FieldBuffer,
    FieldSpec,
    read_field,
    read_form,
    run_validators,
)
from agenda.logic.messages import ERROR_MESSAGES, ERROR_PREFIX
from agenda.logic.validators import ValidationError, get_validator

REQUIRED = get_validator("required")
STRING = get_validator("string")
NUMBER = get_validator("number")
NATIONAL_ID = get_validator("national_id")
PHONE = get_validator("phone")


def output_of(console):
    return console.stdout.getvalue()


class TestFieldBuffer:
    def test_defaults_to_empty(self):
        buffer = FieldBuffer(max_length=10)
        assert buffer.value == ""

    def test_value_must_fit_capacity(self):
        with pytest.raises(ValueError):
            FieldBuffer(max_length=4, value="abcd")

    def test_assignment_is_checked(self):
        buffer = FieldBuffer(max_length=4, value="abc")
        with pytest.raises(ValueError):
            buffer.value = "abcd"
        assert buffer.value == "abc"


class TestRunValidators:
    def test_all_pass(self):
        assert run_validators("José", [REQUIRED, STRING]) == ValidationError.NO_ERROR

    def test_first_failure_wins(self):
        assert run_validators("", [REQUIRED, NATIONAL_ID]) == ValidationError.MISSING_REQUIRED

    def test_order_matters(self):
        # empty text is a valid string, so only the required check fails
        assert run_validators("", [STRING, REQUIRED]) == ValidationError.MISSING_REQUIRED
        assert run_validators("", [NATIONAL_ID, REQUIRED]) == ValidationError.INVALID_NATIONAL_ID

    def test_no_validators(self):
        assert run_validators("anything", []) == ValidationError.NO_ERROR


class TestReadField:
    def test_accepts_valid_value(self, console_factory):
        console = console_factory("Maria Silva\n")
        buffer = FieldBuffer(max_length=51)

        result = read_field(buffer, "Nome", 51, [REQUIRED, STRING], console)

        assert result == "Maria Silva"
        assert buffer.value == "Maria Silva"
        assert output_of(console) == "Nome: "

    def test_rejects_then_accepts(self, console_factory):
        console = console_factory("\nJosé\n")
        buffer = FieldBuffer(max_length=51)

        result = read_field(buffer, "Nome", 51, [REQUIRED, STRING], console)

        out = output_of(console)
        assert result == "José"
        assert out.count("Nome: ") == 2
        assert out.count(ERROR_PREFIX) == 1
        assert ERROR_MESSAGES[ValidationError.MISSING_REQUIRED] in out

    def test_only_first_failure_is_reported(self, console_factory, valid_national_id):
        console = console_factory(f"12a\n{valid_national_id}\n")
        buffer = FieldBuffer(max_length=12)

        read_field(buffer, "CPF", 12, [REQUIRED, NUMBER, NATIONAL_ID], console)

        out = output_of(console)
        assert out.count(ERROR_PREFIX) == 1
        assert ERROR_MESSAGES[ValidationError.INVALID_NUMBER] in out
        assert ERROR_MESSAGES[ValidationError.INVALID_NATIONAL_ID] not in out

    def test_every_attempt_runs_all_validators(self, console_factory, valid_national_id):
        console = console_factory(f"\n12a\n123\n{valid_national_id}\n")
        buffer = FieldBuffer(max_length=12)

        result = read_field(buffer, "CPF", 12, [REQUIRED, NUMBER, NATIONAL_ID], console)

        out = output_of(console)
        assert result == valid_national_id
        assert out.count("CPF: ") == 4
        required_at = out.index(ERROR_MESSAGES[ValidationError.MISSING_REQUIRED])
        number_at = out.index(ERROR_MESSAGES[ValidationError.INVALID_NUMBER])
        national_id_at = out.index(ERROR_MESSAGES[ValidationError.INVALID_NATIONAL_ID])
        assert required_at < number_at < national_id_at

    def test_empty_line_keeps_prefilled_value(self, console_factory, valid_phone):
        console = console_factory("\n")
        buffer = FieldBuffer(max_length=14, value=valid_phone)

        result = read_field(buffer, "Telefone", 14, [REQUIRED, PHONE], console)

        assert result == valid_phone
        assert buffer.value == valid_phone
        assert ERROR_PREFIX not in output_of(console)

    def test_rejected_value_becomes_default(self, console_factory):
        console = console_factory("abc\n\n42\n")
        buffer = FieldBuffer(max_length=11)

        result = read_field(buffer, "Número", 11, [NUMBER], console)

        assert result == "42"
        assert output_of(console).count(ERROR_MESSAGES[ValidationError.INVALID_NUMBER]) == 2

    def test_excess_input_is_discarded(self, console_factory):
        console = console_factory("123456789\nrest")
        buffer = FieldBuffer(max_length=6)

        result = read_field(buffer, "Código", 6, [NUMBER], console)

        assert result == "12345"
        assert console.stdin.read() == "rest"

    def test_capacity_never_exceeds_buffer(self, console_factory):
        console = console_factory("123456\n")
        buffer = FieldBuffer(max_length=4)

        assert read_field(buffer, "Código", 10, [NUMBER], console) == "123"

    def test_capacity_defaults_to_buffer(self, console_factory):
        console = console_factory("123456\n")
        buffer = FieldBuffer(max_length=3)

        assert read_field(buffer, "Código", validators=[NUMBER], console=console) == "12"

    def test_last_line_without_newline(self, console_factory):
        console = console_factory("Ana")
        buffer = FieldBuffer(max_length=51)

        assert read_field(buffer, "Nome", 51, [REQUIRED, STRING], console) == "Ana"

    def test_end_of_input_aborts(self, console_factory):
        console = console_factory("")
        buffer = FieldBuffer(max_length=51)

        with pytest.raises(FieldEntryAborted) as exc_info:
            read_field(buffer, "Nome", 51, [REQUIRED], console)
        assert exc_info.value.label == "Nome"

    def test_end_of_input_after_rejection_aborts(self, console_factory):
        console = console_factory("x\n")
        buffer = FieldBuffer(max_length=11)

        with pytest.raises(FieldEntryAborted):
            read_field(buffer, "Número", 11, [NUMBER], console)
        assert ERROR_MESSAGES[ValidationError.INVALID_NUMBER] in output_of(console)


class TestReadForm:
    def setup_method(self):
        self.form = [
            FieldSpec(name="name", label="Nome", max_length=51, validators=[REQUIRED, STRING]),
            FieldSpec(name="code", label="Código", max_length=6, validators=[REQUIRED, NUMBER]),
        ]

    def test_reads_fields_in_order(self, console_factory):
        console = console_factory("Ana\n123\n")

        values = read_form(self.form, console)

        assert values == {"name": "Ana", "code": "123"}
        out = output_of(console)
        assert out.index("Nome: ") < out.index("Código: ")

    def test_defaults_fill_empty_lines(self, console_factory):
        console = console_factory("\n\n")

        values = read_form(self.form, console, defaults={"name": "Ana", "code": "7"})

        assert values == {"name": "Ana", "code": "7"}

    def test_abort_propagates(self, console_factory):
        console = console_factory("Ana\n")

        with pytest.raises(FieldEntryAborted) as exc_info:
            read_form(self.form, console)
        assert exc_info.value.label == "Código"
