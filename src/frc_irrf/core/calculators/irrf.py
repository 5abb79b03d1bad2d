"""Progressive IRRF withholding calculator.

Uses the simplified progressive formula of the Receita Federal tables:

    imposto = base * aliquota - parcela a deduzir

The bracket is the first one (in table order) whose inclusive range
contains the gross value. The calculator never raises: a missing table,
a value outside every bracket or a non-positive/non-numeric base yields
zero, and `ResultadoIRRF.encontrou` tells the caller which case it was.
"""

from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, Optional

from frc_irrf.core.models.enums import TipoProblemaTabela
from frc_irrf.core.models.tax import FaixaIRRF, ProblemaTabela, ResultadoIRRF
from frc_irrf.core.rules.tax_constants import CENTAVO

ZERO = Decimal("0.00")


def para_decimal(valor: Any) -> Optional[Decimal]:
    """Convert a gross value to a finite Decimal.

    Floats go through str() to avoid binary artifacts (2259.2 -> "2259.2").

    Returns:
        Decimal, or None for None/bool/non-numeric/NaN/infinite input
    """
    if valor is None or isinstance(valor, bool):
        return None
    try:
        if isinstance(valor, Decimal):
            resultado = valor
        elif isinstance(valor, (int, float)):
            resultado = Decimal(str(valor))
        elif isinstance(valor, str):
            resultado = Decimal(valor.strip())
        else:
            return None
    except (InvalidOperation, ValueError):
        return None

    return resultado if resultado.is_finite() else None


def arredondar(valor: Decimal) -> Decimal:
    """Round to cents, half-up."""
    return valor.quantize(CENTAVO, rounding=ROUND_HALF_UP)


def encontrar_faixa(valor: Decimal, faixas: Sequence[FaixaIRRF]) -> Optional[FaixaIRRF]:
    """Return the first bracket whose inclusive range contains the value."""
    for faixa in faixas:
        if faixa.contem(valor):
            return faixa
    return None


def calcular_irrf(valor_bruto: Any, faixas: Optional[Sequence[FaixaIRRF]]) -> ResultadoIRRF:
    """Calculate withholding for a gross value.

    Args:
        valor_bruto: Gross value (Decimal, int, float or numeric string)
        faixas: Bracket table for the reference year, ascending order

    Returns:
        ResultadoIRRF with the tax rounded to cents and match information
    """
    base = para_decimal(valor_bruto)
    if base is None or base <= 0 or not faixas:
        return ResultadoIRRF(valor=ZERO, encontrou=False)

    faixa = encontrar_faixa(base, faixas)
    if faixa is None:
        return ResultadoIRRF(valor=ZERO, encontrou=False)

    imposto = base * faixa.aliquota - faixa.deducao
    imposto = arredondar(max(Decimal("0"), imposto))

    return ResultadoIRRF(valor=imposto, encontrou=True, faixa=faixa)


def calcular_valor_irrf(valor_bruto: Any, faixas: Optional[Sequence[FaixaIRRF]]) -> Decimal:
    """Calculate withholding amount only (see calcular_irrf)."""
    return calcular_irrf(valor_bruto, faixas).valor


def validar_tabela(faixas: Sequence[FaixaIRRF]) -> list[ProblemaTabela]:
    """Check that a bracket table partitions [0, inf) without gaps or overlaps.

    Administrative check only; the calculator applies first-match semantics
    regardless of what this reports. Adjacent brackets are expected to be
    one cent apart (max 2259.20 -> next min 2259.21).

    Args:
        faixas: Brackets in table order

    Returns:
        List of problems found (empty if the table is consistent)
    """
    problemas: list[ProblemaTabela] = []

    if not faixas:
        return [
            ProblemaTabela(
                tipo=TipoProblemaTabela.TABELA_VAZIA,
                descricao="Tabela sem faixas: o IRRF será zero para qualquer valor",
            )
        ]

    for faixa in faixas:
        if not Decimal("0") <= faixa.aliquota < Decimal("1"):
            problemas.append(
                ProblemaTabela(
                    tipo=TipoProblemaTabela.ALIQUOTA_INVALIDA,
                    descricao=f"Alíquota {faixa.aliquota} fora do intervalo [0, 1)",
                    faixa_id=faixa.id,
                )
            )
        if faixa.deducao < 0:
            problemas.append(
                ProblemaTabela(
                    tipo=TipoProblemaTabela.DEDUCAO_NEGATIVA,
                    descricao=f"Dedução negativa ({faixa.deducao})",
                    faixa_id=faixa.id,
                )
            )
        if faixa.valor_maximo is not None and faixa.valor_maximo < faixa.valor_minimo:
            problemas.append(
                ProblemaTabela(
                    tipo=TipoProblemaTabela.LIMITES_INVERTIDOS,
                    descricao=(
                        f"Máximo {faixa.valor_maximo} menor que mínimo {faixa.valor_minimo}"
                    ),
                    faixa_id=faixa.id,
                )
            )

    primeira = faixas[0]
    if primeira.valor_minimo != 0:
        problemas.append(
            ProblemaTabela(
                tipo=TipoProblemaTabela.INICIO_DIFERENTE_DE_ZERO,
                descricao=(
                    f"Primeira faixa começa em {primeira.valor_minimo}: "
                    "valores abaixo ficam sem faixa"
                ),
                faixa_id=primeira.id,
            )
        )

    for anterior, atual in zip(faixas, faixas[1:]):
        if anterior.valor_maximo is None:
            problemas.append(
                ProblemaTabela(
                    tipo=TipoProblemaTabela.FAIXA_ABERTA_NAO_FINAL,
                    descricao="Faixa sem limite superior não é a última da tabela",
                    faixa_id=anterior.id,
                )
            )
            continue

        if atual.valor_minimo <= anterior.valor_maximo:
            problemas.append(
                ProblemaTabela(
                    tipo=TipoProblemaTabela.SOBREPOSICAO,
                    descricao=(
                        f"Faixa inicia em {atual.valor_minimo}, antes do fim da anterior "
                        f"({anterior.valor_maximo})"
                    ),
                    faixa_id=atual.id,
                )
            )
        elif atual.valor_minimo - anterior.valor_maximo > CENTAVO:
            problemas.append(
                ProblemaTabela(
                    tipo=TipoProblemaTabela.LACUNA,
                    descricao=(
                        f"Lacuna entre {anterior.valor_maximo} e {atual.valor_minimo}: "
                        "valores nesse intervalo não terão IRRF"
                    ),
                    faixa_id=atual.id,
                )
            )

    if faixas[-1].valor_maximo is not None:
        problemas.append(
            ProblemaTabela(
                tipo=TipoProblemaTabela.SEM_FAIXA_ABERTA,
                descricao=(
                    f"Última faixa termina em {faixas[-1].valor_maximo}: "
                    "valores acima ficam sem IRRF"
                ),
                faixa_id=faixas[-1].id,
            )
        )

    return problemas
