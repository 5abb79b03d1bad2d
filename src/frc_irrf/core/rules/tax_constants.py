"""IRRF tables and FRC payment constants.

Monthly progressive table for ano-calendário 2025 (Receita Federal).
Boundaries are set one cent apart so a value equal to a limit belongs to
exactly one bracket.
Source:
- https://www.gov.br/receitafederal/pt-br/assuntos/meu-imposto-de-renda/tabelas/2025
"""

from decimal import Decimal

from frc_irrf.core.models.tax import FaixaIRRF, TabelaIRRF

# Rounding step for currency values
CENTAVO = Decimal("0.01")

# === Tax Brackets (Monthly, 2025) ===
# Format: (id, minimo, maximo, aliquota, deducao)

FAIXAS_IRRF_2025 = (
    FaixaIRRF(id="1", valor_minimo=Decimal("0"), valor_maximo=Decimal("2259.20"),
              aliquota=Decimal("0"), deducao=Decimal("0")),           # Isento
    FaixaIRRF(id="2", valor_minimo=Decimal("2259.21"), valor_maximo=Decimal("2826.65"),
              aliquota=Decimal("0.075"), deducao=Decimal("169.44")),  # 7,5%
    FaixaIRRF(id="3", valor_minimo=Decimal("2826.66"), valor_maximo=Decimal("3751.05"),
              aliquota=Decimal("0.15"), deducao=Decimal("381.44")),   # 15%
    FaixaIRRF(id="4", valor_minimo=Decimal("3751.06"), valor_maximo=Decimal("4664.68"),
              aliquota=Decimal("0.225"), deducao=Decimal("662.77")),  # 22,5%
    FaixaIRRF(id="5", valor_minimo=Decimal("4664.69"), valor_maximo=None,
              aliquota=Decimal("0.275"), deducao=Decimal("896.00")),  # 27,5%
)

TABELA_IRRF_2025 = TabelaIRRF(ano=2025, faixas=FAIXAS_IRRF_2025)

# Tables available without a data snapshot
TABELAS_PADRAO: dict[int, TabelaIRRF] = {
    2025: TABELA_IRRF_2025,
}

# === Certificate copy prices (free acts reimbursement) ===
VALOR_VIA_1 = Decimal("65.00")  # 1st copy
VALOR_VIA_2 = Decimal("21.00")  # 2nd copy

# Trailing window of the dashboard chart
JANELA_PADRAO_PERIODOS = 6
