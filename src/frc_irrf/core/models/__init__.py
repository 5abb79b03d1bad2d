"""Domain models for FRC payments, notaries and IRRF tables."""

from frc_irrf.core.models.enums import (
    Genero,
    Papel,
    StatusCartorio,
    StatusPagamento,
    TipoHistorico,
    TipoLote,
    TipoProblemaTabela,
    Vinculo,
)
from frc_irrf.core.models.tax import FaixaIRRF, ProblemaTabela, ResultadoIRRF, TabelaIRRF
from frc_irrf.core.models.payment import Pagamento, Periodo, parse_mes
from frc_irrf.core.models.notary import Cartorio
from frc_irrf.core.models.report import GrupoCedula, PontoSerie, ResumoFinanceiro
from frc_irrf.core.models.user import PerfilUsuario

__all__ = [
    "Genero",
    "Papel",
    "StatusCartorio",
    "StatusPagamento",
    "TipoHistorico",
    "TipoLote",
    "TipoProblemaTabela",
    "Vinculo",
    "FaixaIRRF",
    "ProblemaTabela",
    "ResultadoIRRF",
    "TabelaIRRF",
    "Pagamento",
    "Periodo",
    "parse_mes",
    "Cartorio",
    "GrupoCedula",
    "PontoSerie",
    "ResumoFinanceiro",
    "PerfilUsuario",
]
