"""Data store boundary: snapshot loading and row mapping."""

from frc_irrf.infrastructure.mappers import (
    carregar_linhas,
    linha_para_cartorio,
    linha_para_faixa,
    linha_para_pagamento,
    linha_para_perfil,
)
from frc_irrf.infrastructure.store import DataStore

__all__ = [
    "DataStore",
    "carregar_linhas",
    "linha_para_cartorio",
    "linha_para_faixa",
    "linha_para_pagamento",
    "linha_para_perfil",
]
