"""
Registration Forms

Field specifications for each entity the office registers, and the
records they produce.
"""

from typing import Dict, List, Type

from agenda.config.constants import (
    ADDRESS_MAX_LENGTH,
    DATE_MAX_LENGTH,
    EMAIL_MAX_LENGTH,
    NAME_MAX_LENGTH,
    NATIONAL_ID_MAX_LENGTH,
    NUMBER_MAX_LENGTH,
    ORG_ID_MAX_LENGTH,
    PHONE_MAX_LENGTH,
    TIME_MAX_LENGTH,
)
from agenda.interface.field_reader import FieldSpec
from agenda.logic.validators import get_validator
from agenda.models import (
    AppointmentRecord,
    ClientRecord,
    LawyerRecord,
    OfficeRecord,
    Record,
)


def _field(name: str, label: str, max_length: int, *validators: str) -> FieldSpec:
    return FieldSpec(
        name=name,
        label=label,
        max_length=max_length,
        validators=[get_validator(v) for v in validators],
    )


CLIENT_FORM = [
    _field("name", "Nome", NAME_MAX_LENGTH, "required", "string"),
    _field("national_id", "CPF", NATIONAL_ID_MAX_LENGTH, "required", "national_id"),
    _field("email", "E-mail", EMAIL_MAX_LENGTH, "required", "email"),
    _field("phone", "Telefone", PHONE_MAX_LENGTH, "required", "phone"),
    _field("birth_date", "Data de nascimento", DATE_MAX_LENGTH, "required", "date"),
]

LAWYER_FORM = [
    _field("name", "Nome", NAME_MAX_LENGTH, "required", "string"),
    _field("national_id", "CPF", NATIONAL_ID_MAX_LENGTH, "required", "national_id"),
    _field("org_id", "CNA", ORG_ID_MAX_LENGTH, "required", "org_id"),
    _field("email", "E-mail", EMAIL_MAX_LENGTH, "required", "email"),
    _field("phone", "Telefone", PHONE_MAX_LENGTH, "required", "phone"),
]

OFFICE_FORM = [
    _field("name", "Nome", NAME_MAX_LENGTH, "required", "alphanumeric"),
    _field("address", "Endereço", ADDRESS_MAX_LENGTH, "required", "alphanumeric"),
    _field("phone", "Telefone", PHONE_MAX_LENGTH, "required", "phone"),
]

APPOINTMENT_FORM = [
    _field("client_national_id", "CPF do cliente", NATIONAL_ID_MAX_LENGTH, "required", "national_id"),
    _field("lawyer_org_id", "CNA do advogado", ORG_ID_MAX_LENGTH, "required", "org_id"),
    _field("office_id", "Número do escritório", NUMBER_MAX_LENGTH, "required", "number", "positive"),
    _field("day", "Data", DATE_MAX_LENGTH, "required", "date"),
    _field("hour", "Horário", TIME_MAX_LENGTH, "required", "time"),
]

# entity key -> (title, form, record type)
FORMS: Dict[str, tuple] = {
    "client": ("Cadastro de Cliente", CLIENT_FORM, ClientRecord),
    "lawyer": ("Cadastro de Advogado", LAWYER_FORM, LawyerRecord),
    "office": ("Cadastro de Escritório", OFFICE_FORM, OfficeRecord),
    "appointment": ("Novo Agendamento", APPOINTMENT_FORM, AppointmentRecord),
}


def get_form(entity: str) -> List[FieldSpec]:
    return FORMS[entity][1]


def get_record_type(entity: str) -> Type[Record]:
    return FORMS[entity][2]
