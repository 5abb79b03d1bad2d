"""Row mappers from data store records to domain models.

Rows use the remote store's snake_case columns (min_value, notary_id,
month_reference, ...). Each row is validated into a frozen model; rows
that fail validation are logged and skipped so the calculation core only
ever receives well-formed records.
"""

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from frc_irrf.core.models import Cartorio, FaixaIRRF, Pagamento, PerfilUsuario

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

# Column name -> model field
COLUNAS_FAIXA = {
    "id": "id",
    "min_value": "valor_minimo",
    "max_value": "valor_maximo",
    "rate": "aliquota",
    "deduction": "deducao",
}

COLUNAS_CARTORIO = {
    "id": "id",
    "name": "nome",
    "code": "codigo",
    "ens_code": "codigo_cns",
    "responsible_name": "responsavel_nome",
    "responsible_cpf": "responsavel_cpf",
    "comarca": "comarca",
    "status": "status",
    "address": "endereco",
    "city": "cidade",
    "state": "uf",
    "cep": "cep",
    "phone": "telefone",
    "email": "email",
    "latitude": "latitude",
    "longitude": "longitude",
    "vinculo_padrao": "vinculo_padrao",
    "data_vinculo": "data_vinculo",
}

COLUNAS_PAGAMENTO = {
    "id": "id",
    "notary_id": "cartorio_id",
    "notary_name": "cartorio_nome",
    "code": "codigo",
    "responsible_name": "responsavel_nome",
    "cpf": "cpf",
    "date": "data",
    "month_reference": "mes_referencia",
    "year_reference": "ano_referencia",
    "comarca": "comarca",
    "gross_value": "valor_bruto",
    "irrf_value": "valor_irrf",
    "net_value": "valor_liquido",
    "history_type": "tipo_historico",
    "status": "status",
    "pending_reason": "motivo_pendencia",
    "lote_type": "tipo_lote",
    "genre": "genero",
    "vinculo": "vinculo",
    "qtd_via1": "qtd_via1",
    "qtd_via2": "qtd_via2",
    "municipality": "municipio",
    "ne_empenho": "ne_empenho",
    "dl_liquidacao": "dl_liquidacao",
    "ob_ordem_bancaria": "ob_ordem_bancaria",
}

COLUNAS_PERFIL = {
    "id": "id",
    "email": "email",
    "full_name": "nome_completo",
    "role": "papel",
}


def _renomear(linha: Mapping[str, Any], colunas: Mapping[str, str]) -> dict[str, Any]:
    """Rename known columns, dropping unknown ones and nulls."""
    return {
        campo: linha[coluna]
        for coluna, campo in colunas.items()
        if coluna in linha and linha[coluna] is not None
    }


def _com_id(dados: dict[str, Any]) -> dict[str, Any]:
    """Store ids may be integers or UUIDs; models use strings."""
    for campo in ("id", "cartorio_id"):
        if campo in dados:
            dados[campo] = str(dados[campo])
    return dados


def linha_para_faixa(linha: Mapping[str, Any]) -> FaixaIRRF:
    """Map an irrf_brackets row."""
    return FaixaIRRF(**_com_id(_renomear(linha, COLUNAS_FAIXA)))


def linha_para_cartorio(linha: Mapping[str, Any]) -> Cartorio:
    """Map a notaries row."""
    return Cartorio(**_com_id(_renomear(linha, COLUNAS_CARTORIO)))


def linha_para_pagamento(linha: Mapping[str, Any]) -> Pagamento:
    """Map a payments row. A missing status defaults to EM ANDAMENTO."""
    return Pagamento(**_com_id(_renomear(linha, COLUNAS_PAGAMENTO)))


def linha_para_perfil(linha: Mapping[str, Any]) -> PerfilUsuario:
    """Map a profiles row."""
    return PerfilUsuario(**_com_id(_renomear(linha, COLUNAS_PERFIL)))


def carregar_linhas(
    linhas: Iterable[Any],
    mapper: Callable[[Mapping[str, Any]], M],
    tabela: str,
) -> list[M]:
    """Map rows, skipping (and logging) the malformed ones.

    Args:
        linhas: Raw rows from the store
        mapper: One of the linha_para_* functions
        tabela: Table name, for log messages

    Returns:
        Valid models in input order
    """
    validos: list[M] = []
    for indice, linha in enumerate(linhas):
        if not isinstance(linha, Mapping):
            logger.warning("%s[%d]: registro ignorado (não é um objeto)", tabela, indice)
            continue
        try:
            validos.append(mapper(linha))
        except PydanticValidationError as e:
            logger.warning(
                "%s[%d]: registro ignorado (id=%s): %d erro(s) de validação: %s",
                tabela,
                indice,
                linha.get("id"),
                e.error_count(),
                "; ".join(err["msg"] for err in e.errors()),
            )
    return validos
