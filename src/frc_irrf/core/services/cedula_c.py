"""Consolidated tax statement (Cédula C) grouping.

The Cédula C is issued per responsible party, not per office: a person
responsible for several notary offices receives one statement with the
payments of all of them.
"""

import logging
from collections.abc import Iterable, Sequence
from typing import Optional

from frc_irrf.core.aggregators.payments import somar_bruto, somar_irrf, somar_liquido
from frc_irrf.core.models.notary import Cartorio
from frc_irrf.core.models.payment import Pagamento
from frc_irrf.core.models.report import GrupoCedula
from frc_irrf.shared.validators import format_cpf

logger = logging.getLogger(__name__)


def ordenar_cronologicamente(pagamentos: Iterable[Pagamento]) -> list[Pagamento]:
    """Sort by reference year, numeric reference month, then payment date.

    Several payments can share a reference month (complementary lots,
    corrections), hence the calendar date as last key.
    """
    return sorted(
        pagamentos,
        key=lambda p: (p.ano_referencia, p.mes_referencia, p.data),
    )


def filtrar_cartorios(cartorios: Iterable[Cartorio], busca: str = "") -> list[Cartorio]:
    """Filter the selection list by name, responsible name or CPF.

    Names are matched case-insensitively; the CPF is matched as typed
    (substring of the stored value).
    """
    termo = busca.strip()
    if not termo:
        return list(cartorios)

    termo_lower = termo.lower()
    return [
        c
        for c in cartorios
        if termo_lower in c.nome.lower()
        or termo_lower in c.responsavel_nome.lower()
        or termo in c.responsavel_cpf
    ]


def agrupar_para_cedula(
    cartorios: Iterable[Cartorio],
    selecionados: Iterable[str],
    pagamentos: Sequence[Pagamento],
    ano: Optional[int] = None,
) -> list[GrupoCedula]:
    """Build one consolidated statement per responsible party.

    Args:
        cartorios: All notary offices
        selecionados: Ids of the offices selected by the operator
        pagamentos: All payments (filtered here by office)
        ano: Reference year to include (None = every year)

    Returns:
        One GrupoCedula per distinct responsible CPF, in the order the
        first office of each person appears
    """
    ids_selecionados = set(selecionados)
    escolhidos = [c for c in cartorios if c.id in ids_selecionados]

    grupos: dict[str, list[Cartorio]] = {}
    for cartorio in escolhidos:
        grupos.setdefault(cartorio.chave_responsavel, []).append(cartorio)

    resultado = []
    for chave, membros in grupos.items():
        ids_membros = {c.id for c in membros}
        do_grupo = [
            p
            for p in pagamentos
            if p.cartorio_id in ids_membros and (ano is None or p.ano_referencia == ano)
        ]
        ordenados = ordenar_cronologicamente(do_grupo)

        resultado.append(
            GrupoCedula(
                cpf_responsavel=format_cpf(chave),
                nome_responsavel=membros[0].responsavel_nome,
                cartorios=tuple(membros),
                pagamentos=tuple(ordenados),
                total_bruto=somar_bruto(ordenados),
                total_irrf=somar_irrf(ordenados),
                total_liquido=somar_liquido(ordenados),
            )
        )

    logger.debug(
        "Cédula C: %d cartório(s) selecionado(s) em %d grupo(s)",
        len(escolhidos),
        len(resultado),
    )
    return resultado
