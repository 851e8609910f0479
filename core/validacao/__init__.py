from .validadores import (
    ResultadoValidacao,
    validar_campo_data,
    validar_campo_email,
    validar_campo_numero,
    validar_campo_texto,
    validar_formulario,
)

# English aliases
ValidationResult = ResultadoValidacao
validate_text_field = validar_campo_texto
validate_email_field = validar_campo_email
validate_number_field = validar_campo_numero
validate_date_field = validar_campo_data
validate_form = validar_formulario

__all__ = [
    "ResultadoValidacao",
    "validar_campo_data",
    "validar_campo_email",
    "validar_campo_numero",
    "validar_campo_texto",
    "validar_formulario",
    # English aliases
    "ValidationResult",
    "validate_date_field",
    "validate_email_field",
    "validate_form",
    "validate_number_field",
    "validate_text_field",
]
