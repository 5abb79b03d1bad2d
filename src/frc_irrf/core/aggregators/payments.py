"""Payment aggregations for the dashboard and payment table.

All functions are pure reducers over in-memory collections. Empty input
always yields zero sums, an empty series or an all-zero distribution.
"""

import re
from collections.abc import Iterable, Sequence
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from frc_irrf.core.models.enums import Genero, StatusPagamento, TipoHistorico, TipoLote
from frc_irrf.core.models.payment import Pagamento, Periodo
from frc_irrf.core.models.report import PontoSerie, ResumoFinanceiro
from frc_irrf.core.rules.tax_constants import JANELA_PADRAO_PERIODOS

# History types shown under each genre tab
TIPOS_POR_GENERO: dict[Genero, frozenset[TipoHistorico]] = {
    Genero.ATOS_GRATUITOS: frozenset(
        {TipoHistorico.REPASSE, TipoHistorico.DEA, TipoHistorico.MESES_ANTERIORES}
    ),
    Genero.RENDA_MINIMA: frozenset({TipoHistorico.RENDA_MINIMA}),
    Genero.AJUDA_CUSTO: frozenset({TipoHistorico.AJUDA_DE_CUSTO}),
}


def somar_bruto(pagamentos: Iterable[Pagamento]) -> Decimal:
    """Sum gross values."""
    return sum((p.valor_bruto for p in pagamentos), Decimal("0"))


def somar_irrf(pagamentos: Iterable[Pagamento]) -> Decimal:
    """Sum withheld IRRF."""
    return sum((p.valor_irrf for p in pagamentos), Decimal("0"))


def somar_liquido(pagamentos: Iterable[Pagamento]) -> Decimal:
    """Sum net values."""
    return sum((p.valor_liquido for p in pagamentos), Decimal("0"))


def resumo_financeiro(pagamentos: Sequence[Pagamento]) -> ResumoFinanceiro:
    """Calculate gross / IRRF / net totals and count."""
    return ResumoFinanceiro(
        bruto=somar_bruto(pagamentos),
        irrf=somar_irrf(pagamentos),
        liquido=somar_liquido(pagamentos),
        quantidade=len(pagamentos),
    )


def agrupar_por_periodo(pagamentos: Iterable[Pagamento]) -> list[PontoSerie]:
    """Group gross and IRRF by reference period, oldest first.

    Months are compared as integers, so 2/2025 comes before 10/2025.

    Args:
        pagamentos: Payments to aggregate

    Returns:
        One PontoSerie per (year, month), ascending
    """
    totais: dict[Periodo, tuple[Decimal, Decimal]] = {}

    for pagamento in pagamentos:
        bruto, irrf = totais.get(pagamento.periodo, (Decimal("0"), Decimal("0")))
        totais[pagamento.periodo] = (
            bruto + pagamento.valor_bruto,
            irrf + pagamento.valor_irrf,
        )

    # sorted() is stable; keys are unique per period anyway
    return [
        PontoSerie(periodo=periodo, bruto=bruto, irrf=irrf)
        for periodo, (bruto, irrf) in sorted(totais.items(), key=lambda item: item[0])
    ]


def distribuicao_status(pagamentos: Sequence[Pagamento]) -> dict[StatusPagamento, int]:
    """Percentage of payments in each workflow status.

    Each status is rounded independently (half-up), so the values may not
    add up to exactly 100.

    Returns:
        Dict with every StatusPagamento, all zero for empty input
    """
    total = len(pagamentos)
    if total == 0:
        return {status: 0 for status in StatusPagamento}

    contagem = {status: 0 for status in StatusPagamento}
    for pagamento in pagamentos:
        contagem[pagamento.status] += 1

    return {
        status: int(
            (Decimal(quantidade) * 100 / total).quantize(Decimal("1"), rounding=ROUND_HALF_UP)
        )
        for status, quantidade in contagem.items()
    }


def ultimos_periodos(serie: Sequence[PontoSerie], n: int = JANELA_PADRAO_PERIODOS) -> list[PontoSerie]:
    """Keep the trailing n periods of a sorted series."""
    if n <= 0:
        return []
    return list(serie[-n:])


def filtrar_por_ano(serie: Iterable[PontoSerie], ano: int) -> list[PontoSerie]:
    """Keep only the periods of one reference year."""
    return [ponto for ponto in serie if ponto.periodo.ano == ano]


_JANELA_ANO = re.compile(r"^ano:(\d{4})$")


def aplicar_janela(
    serie: Sequence[PontoSerie],
    janela: str = "6meses",
    n: int = JANELA_PADRAO_PERIODOS,
) -> list[PontoSerie]:
    """Apply a dashboard time window to an already grouped series.

    Args:
        serie: Output of agrupar_por_periodo
        janela: "6meses" (trailing n periods), "ano:AAAA" or "tudo"
        n: Size of the trailing window

    Raises:
        ValueError: If the window is not recognized
    """
    if janela == "tudo":
        return list(serie)
    if janela == "6meses":
        return ultimos_periodos(serie, n)

    match = _JANELA_ANO.match(janela)
    if match:
        return filtrar_por_ano(serie, int(match.group(1)))

    raise ValueError(f"Janela inválida: {janela!r}. Use 6meses, ano:AAAA ou tudo")


def filtrar_pagamentos(
    pagamentos: Iterable[Pagamento],
    *,
    genero: Optional[Genero] = None,
    tipo_historico: Optional[TipoHistorico] = None,
    busca: str = "",
    ano: Optional[int] = None,
    tipo_lote: Optional[TipoLote] = None,
) -> list[Pagamento]:
    """Filter payments the way the payment table does.

    Args:
        pagamentos: Payments to filter
        genero: Genre tab (restricts history types, see TIPOS_POR_GENERO)
        tipo_historico: Sub-tab history type
        busca: Case-insensitive text matched on office or responsible name
        ano: Reference year
        tipo_lote: Lot type

    Returns:
        Matching payments in input order
    """
    tipos = TIPOS_POR_GENERO.get(genero) if genero else None
    termo = busca.strip().lower()

    resultado = []
    for p in pagamentos:
        if tipos is not None and p.tipo_historico not in tipos:
            continue
        if tipo_historico is not None and p.tipo_historico != tipo_historico:
            continue
        if termo and termo not in p.cartorio_nome.lower() and termo not in p.responsavel_nome.lower():
            continue
        if ano is not None and p.ano_referencia != ano:
            continue
        if tipo_lote is not None and p.tipo_lote != tipo_lote:
            continue
        resultado.append(p)

    return resultado
