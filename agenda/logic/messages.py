"""
Validation Messages

One fixed diagnostic per validation error code.
"""

from agenda.logic.validators.base import ValidationError

ERROR_PREFIX = "Erro de validação: "

ERROR_MESSAGES = {
    ValidationError.INVALID_STRING: "O campo não é um texto válido",
    ValidationError.MISSING_REQUIRED: "O campo deve ser obrigatório",
    ValidationError.NOT_POSITIVE: "O campo deve ser maior do que 1",
    ValidationError.INVALID_EMAIL: "O campo não é um e-mail válido (<palavra>@<palavra>.<domínio>)",
    ValidationError.INVALID_PHONE: "O campo não é um telefone válido (XX 9XXXX-XXXX)",
    ValidationError.INVALID_NATIONAL_ID: "O campo não é um CPF válido (XXXXXXXXXXX)",
    ValidationError.INVALID_ORG_ID: "O campo não é uma CNA válida (XXXXXXXXXXXX)",
    ValidationError.INVALID_DATE: "O campo não é uma data válida (DD/MM/AAAA)",
    ValidationError.INVALID_NUMBER: "O campo não é um número válido",
    ValidationError.INVALID_TIME: "O campo não é um horário válido (hh:mm)",
}


def error_message(code: ValidationError) -> str:
    """
    Look up the diagnostic for an error code.

    Returns:
        The message text, or an empty string for NO_ERROR.
    """
    return ERROR_MESSAGES.get(ValidationError(code), "")
