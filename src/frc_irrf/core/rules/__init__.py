"""Business rules and constants for FRC IRRF."""

from frc_irrf.core.rules.tax_constants import (
    CENTAVO,
    FAIXAS_IRRF_2025,
    JANELA_PADRAO_PERIODOS,
    TABELA_IRRF_2025,
    TABELAS_PADRAO,
    VALOR_VIA_1,
    VALOR_VIA_2,
)

__all__ = [
    "CENTAVO",
    "FAIXAS_IRRF_2025",
    "JANELA_PADRAO_PERIODOS",
    "TABELA_IRRF_2025",
    "TABELAS_PADRAO",
    "VALOR_VIA_1",
    "VALOR_VIA_2",
]
