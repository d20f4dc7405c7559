# -*- coding: utf-8 -*-
# Copyright (c) 2024, Cupom Verde
# License: GNU General Public License v3

"""
Validation Utilities for Cupom Verde

Checks API keys, receipt XML, CPFs and receipt keys before anything is sent
to the API. Messages are fixed literals that existing integrations match on.
"""

import re
from dataclasses import dataclass
from typing import Any, Callable

from validate_docbr import CPF

from cupomverde.exceptions import ValidationError

API_KEY_NOT_INFORMED = "API Key não foi informada por parâmetro ou por variavel de ambiente."
API_KEY_INVALID = "API Key não é válida, informe uma Api Key válida."
XML_NOT_INFORMED = "XML não informado."
CPF_NOT_INFORMED = "cpfCliente não informado, informe um cpf válido."
CPF_INVALID = "cpfCliente inválido, informe um cpf válido."
CHAVE_NOT_INFORMED = "Chave não informada."

UUID_PATTERN = r"^[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}\Z"

_NON_DIGITS = re.compile(r"\D")
_cpf = CPF()


@dataclass
class FieldError:
    """Single validation error"""
    field: str
    message: str
    code: str = "invalid"
    value: Any = None


@dataclass
class ValidationResult:
    """Result of validation"""
    is_valid: bool
    errors: list[FieldError]

    def raise_if_invalid(self):
        """Raise ValidationError with the first failure's message"""
        if not self.is_valid:
            raise ValidationError(self.errors[0].message)


class Validator:
    """Chainable field validator.

    A failed check skips the remaining checks of the same field, so the
    first error recorded for a field is the one reported.
    """

    def __init__(self):
        self._errors: list[FieldError] = []
        self._current_field: str | None = None
        self._current_value: Any = None
        self._skip_remaining = False

    def field(self, name: str, value: Any) -> "Validator":
        """Start validating a new field"""
        self._current_field = name
        self._current_value = value
        self._skip_remaining = False
        return self

    def _add_error(self, message: str, code: str = "invalid"):
        self._errors.append(FieldError(
            field=self._current_field or "unknown",
            message=message,
            code=code,
            value=self._current_value
        ))
        self._skip_remaining = True

    def required(self, message: str) -> "Validator":
        if self._skip_remaining:
            return self
        if self._current_value is None or self._current_value == "":
            self._add_error(message, "required")
        return self

    def regex(self, pattern: str, message: str) -> "Validator":
        if self._skip_remaining:
            return self
        if not re.match(pattern, str(self._current_value)):
            self._add_error(message, "format")
        return self

    def custom(self, validator_func: Callable[[Any], bool], message: str) -> "Validator":
        if self._skip_remaining:
            return self
        if not validator_func(self._current_value):
            self._add_error(message, "custom")
        return self

    def validate(self) -> ValidationResult:
        return ValidationResult(
            is_valid=len(self._errors) == 0,
            errors=self._errors.copy()
        )


def is_valid_cpf(cpf: str) -> bool:
    """Check CPF checksum digits. Punctuation is accepted, repeated digits are not."""
    return _cpf.validate(str(cpf))


def normalize_cpf(cpf: str) -> str:
    """Strip everything but digits, e.g. ``000.000.000-00`` -> ``00000000000``"""
    return _NON_DIGITS.sub("", str(cpf))


def validate_api_key(api_key: str) -> ValidationResult:
    """Validate API key syntax (UUID)"""
    return (Validator()
        .field("api_key", api_key)
        .required(API_KEY_INVALID)
        .regex(UUID_PATTERN, API_KEY_INVALID)
        .validate())


def validate_receipt_submission(xml_cupom_fiscal: str, cpf_cliente: str) -> ValidationResult:
    """Validate receipt XML and customer CPF, XML first"""
    v = Validator()
    v.field("xmlCupomFiscal", xml_cupom_fiscal).required(XML_NOT_INFORMED)
    if v.validate().is_valid:
        (v.field("cpfCliente", cpf_cliente)
            .required(CPF_NOT_INFORMED)
            .custom(is_valid_cpf, CPF_INVALID))
    return v.validate()


def validate_receipt_key(chave_cupom_fiscal: str) -> ValidationResult:
    """Validate receipt key presence"""
    return (Validator()
        .field("chaveCupomFiscal", chave_cupom_fiscal)
        .required(CHAVE_NOT_INFORMED)
        .validate())
