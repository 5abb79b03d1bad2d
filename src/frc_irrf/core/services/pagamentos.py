"""Payment registration and audit workflow.

IRRF is computed once, at registration, with the bracket table of the
payment's reference year. Later table changes do not recalculate
existing payments.
"""

import logging
import uuid
from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from frc_irrf.core.calculators.irrf import calcular_irrf
from frc_irrf.core.models.enums import Genero, StatusPagamento, TipoHistorico, TipoLote
from frc_irrf.core.models.notary import Cartorio
from frc_irrf.core.models.payment import Pagamento
from frc_irrf.core.models.tax import TabelaIRRF
from frc_irrf.core.rules.tax_constants import VALOR_VIA_1, VALOR_VIA_2
from frc_irrf.shared.exceptions import StatusTransitionError, ValidationError

logger = logging.getLogger(__name__)

HISTORICO_POR_GENERO: dict[Genero, TipoHistorico] = {
    Genero.ATOS_GRATUITOS: TipoHistorico.REPASSE,
    Genero.RENDA_MINIMA: TipoHistorico.RENDA_MINIMA,
    Genero.AJUDA_CUSTO: TipoHistorico.AJUDA_DE_CUSTO,
}


class RegistroPagamento(BaseModel):
    """A newly registered payment plus the operator-facing alert, if any."""

    pagamento: Pagamento
    alerta: Optional[str] = Field(
        default=None, description="Set when no IRRF bracket applied (missing table)"
    )

    model_config = {"frozen": True}


def calcular_valor_bruto(
    qtd_via1: int,
    qtd_via2: int,
    valor_via1: Decimal = VALOR_VIA_1,
    valor_via2: Decimal = VALOR_VIA_2,
) -> Decimal:
    """Gross value of a free-acts reimbursement from copy quantities."""
    if qtd_via1 < 0 or qtd_via2 < 0:
        raise ValidationError("Quantidade de vias não pode ser negativa")
    return qtd_via1 * valor_via1 + qtd_via2 * valor_via2


def registrar_pagamento(
    cartorio: Cartorio,
    tabela: TabelaIRRF,
    *,
    mes: int,
    ano: int,
    data: date,
    qtd_via1: int = 0,
    qtd_via2: int = 0,
    valor_bruto: Optional[Decimal] = None,
    genero: Genero = Genero.ATOS_GRATUITOS,
    tipo_lote: TipoLote = TipoLote.PRINCIPAL,
    valor_via1: Decimal = VALOR_VIA_1,
    valor_via2: Decimal = VALOR_VIA_2,
    pagamento_id: Optional[str] = None,
) -> RegistroPagamento:
    """Create a payment with IRRF and net value computed.

    Args:
        cartorio: Receiving notary office (responsible data is copied)
        tabela: IRRF table of the reference year
        mes: Reference month
        ano: Reference year
        data: Payment date
        qtd_via1: 1st-copy quantity (ignored when valor_bruto is given)
        qtd_via2: 2nd-copy quantity (ignored when valor_bruto is given)
        valor_bruto: Explicit gross value (minimum income, cost aid)
        genero: Payment genre, determines the history type
        tipo_lote: Principal or complementary lot
        valor_via1: Price of a 1st copy
        valor_via2: Price of a 2nd copy
        pagamento_id: Identifier (generated when omitted)

    Returns:
        RegistroPagamento; `alerta` is set when the table had no matching
        bracket, so the operator does not take a zero IRRF at face value

    Raises:
        ValidationError: If the table year differs from the reference year
            or the values are invalid
    """
    if tabela.ano != ano:
        raise ValidationError(
            f"Tabela IRRF de {tabela.ano} não corresponde ao ano de referência {ano}"
        )

    if valor_bruto is None:
        bruto = calcular_valor_bruto(qtd_via1, qtd_via2, valor_via1, valor_via2)
    else:
        if valor_bruto < 0:
            raise ValidationError("Valor bruto não pode ser negativo")
        bruto = valor_bruto

    resultado = calcular_irrf(bruto, tabela.faixas)

    alerta = None
    if not resultado.encontrou and bruto > 0:
        alerta = f"Tabela IRRF ausente ou incompleta para o ano {ano}: IRRF não retido"
        logger.warning(
            "Nenhuma faixa IRRF aplicável: cartorio=%s bruto=%s ano=%d",
            cartorio.id,
            bruto,
            ano,
        )

    try:
        pagamento = Pagamento(
            id=pagamento_id or uuid.uuid4().hex,
            cartorio_id=cartorio.id,
            cartorio_nome=cartorio.nome,
            codigo=cartorio.codigo,
            responsavel_nome=cartorio.responsavel_nome,
            cpf=cartorio.responsavel_cpf,
            data=data,
            mes_referencia=mes,
            ano_referencia=ano,
            comarca=cartorio.comarca,
            municipio=cartorio.cidade,
            valor_bruto=bruto,
            valor_irrf=resultado.valor,
            valor_liquido=bruto - resultado.valor,
            tipo_historico=HISTORICO_POR_GENERO[genero],
            status=StatusPagamento.EM_ANDAMENTO,
            genero=genero,
            tipo_lote=tipo_lote,
            vinculo=cartorio.vinculo_padrao,
            qtd_via1=qtd_via1 if valor_bruto is None else 0,
            qtd_via2=qtd_via2 if valor_bruto is None else 0,
        )
    except ValueError as e:
        raise ValidationError(f"Pagamento inválido: {e}") from e

    logger.info(
        "Pagamento registrado: cartorio=%s lote=%s bruto=%s irrf=%s",
        cartorio.id,
        pagamento.lote,
        pagamento.valor_bruto,
        pagamento.valor_irrf,
    )
    return RegistroPagamento(pagamento=pagamento, alerta=alerta)


def atualizar_status(
    pagamento: Pagamento,
    novo_status: StatusPagamento,
    motivo: Optional[str] = None,
) -> Pagamento:
    """Move a payment through the audit workflow.

    PENDENTE requires a reason; any other status clears it.

    Raises:
        StatusTransitionError: If PENDENTE is requested without a reason
    """
    if novo_status == StatusPagamento.PENDENTE:
        if not motivo or not motivo.strip():
            raise StatusTransitionError("Informe o motivo da pendência")
        motivo_final: Optional[str] = motivo.strip()
    else:
        motivo_final = None

    logger.info(
        "Status do pagamento %s: %s -> %s",
        pagamento.id,
        pagamento.status.value,
        novo_status.value,
    )
    return pagamento.model_copy(
        update={"status": novo_status, "motivo_pendencia": motivo_final}
    )
