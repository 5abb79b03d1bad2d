"""Tax calculators."""

from frc_irrf.core.calculators.irrf import (
    arredondar,
    calcular_irrf,
    calcular_valor_irrf,
    encontrar_faixa,
    para_decimal,
    validar_tabela,
)

__all__ = [
    "arredondar",
    "calcular_irrf",
    "calcular_valor_irrf",
    "encontrar_faixa",
    "para_decimal",
    "validar_tabela",
]
