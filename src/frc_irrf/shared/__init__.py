"""Shared utilities for FRC IRRF."""

from frc_irrf.shared.formatters import (
    format_currency,
    format_date,
    format_lote,
    format_percentage,
    format_rate,
)
from frc_irrf.shared.validators import (
    format_cpf,
    mask_cpf,
    somente_digitos,
    validate_cpf,
)

__all__ = [
    # Formatters
    "format_currency",
    "format_date",
    "format_lote",
    "format_percentage",
    "format_rate",
    # Validators
    "format_cpf",
    "mask_cpf",
    "somente_digitos",
    "validate_cpf",
]
