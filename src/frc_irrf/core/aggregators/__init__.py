"""Payment aggregations."""

from frc_irrf.core.aggregators.payments import (
    TIPOS_POR_GENERO,
    agrupar_por_periodo,
    aplicar_janela,
    distribuicao_status,
    filtrar_pagamentos,
    filtrar_por_ano,
    resumo_financeiro,
    somar_bruto,
    somar_irrf,
    somar_liquido,
    ultimos_periodos,
)

__all__ = [
    "TIPOS_POR_GENERO",
    "agrupar_por_periodo",
    "aplicar_janela",
    "distribuicao_status",
    "filtrar_pagamentos",
    "filtrar_por_ano",
    "resumo_financeiro",
    "somar_bruto",
    "somar_irrf",
    "somar_liquido",
    "ultimos_periodos",
]
