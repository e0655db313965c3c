"""
Pydantic Records

Typed records built from the values a registration form collects.
Dates arrive as DD/MM/YYYY and times as HH:MM.
"""

from datetime import date, time
from typing import List

from pydantic import BaseModel, Field, field_validator

from agenda.logic.validators.schedule import parse_date, parse_time

DATE_FORMAT = "%d/%m/%Y"
TIME_FORMAT = "%H:%M"


def _parse_date(value):
    if isinstance(value, str):
        parsed = parse_date(value)
        if parsed is None:
            raise ValueError(f"{value!r} is not a DD/MM/YYYY date")
        return parsed
    return value


def _parse_time(value):
    if isinstance(value, str):
        parsed = parse_time(value)
        if parsed is None:
            raise ValueError(f"{value!r} is not an HH:MM time")
        return parsed
    return value


class Record(BaseModel):
    """Base for form records; renders a labelled summary."""

    def summary_lines(self) -> List[str]:
        lines = []
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if isinstance(value, date):
                value = value.strftime(DATE_FORMAT)
            elif isinstance(value, time):
                value = value.strftime(TIME_FORMAT)
            lines.append(f"{field.description or name}: {value}")
        return lines


class ClientRecord(Record):
    name: str = Field(..., description="Nome")
    national_id: str = Field(..., description="CPF")
    email: str = Field(..., description="E-mail")
    phone: str = Field(..., description="Telefone")
    birth_date: date = Field(..., description="Data de nascimento")

    @field_validator("birth_date", mode="before")
    @classmethod
    def parse_birth_date(cls, value):
        return _parse_date(value)


class LawyerRecord(Record):
    name: str = Field(..., description="Nome")
    national_id: str = Field(..., description="CPF")
    org_id: str = Field(..., description="CNA")
    email: str = Field(..., description="E-mail")
    phone: str = Field(..., description="Telefone")


class OfficeRecord(Record):
    name: str = Field(..., description="Nome")
    address: str = Field(..., description="Endereço")
    phone: str = Field(..., description="Telefone")


class AppointmentRecord(Record):
    client_national_id: str = Field(..., description="CPF do cliente")
    lawyer_org_id: str = Field(..., description="CNA do advogado")
    office_id: int = Field(..., ge=0, description="Número do escritório")
    day: date = Field(..., description="Data")
    hour: time = Field(..., description="Horário")

    @field_validator("day", mode="before")
    @classmethod
    def parse_day(cls, value):
        return _parse_date(value)

    @field_validator("hour", mode="before")
    @classmethod
    def parse_hour(cls, value):
        return _parse_time(value)
