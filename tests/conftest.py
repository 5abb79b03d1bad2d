"""Pytest configuration and fixtures."""

import json
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest

from frc_irrf.core.models import (
    Cartorio,
    FaixaIRRF,
    Pagamento,
    PerfilUsuario,
    Papel,
    StatusPagamento,
    TipoHistorico,
)
from frc_irrf.core.rules import FAIXAS_IRRF_2025, TABELA_IRRF_2025


@pytest.fixture
def faixas_2025() -> list[FaixaIRRF]:
    """2025 progressive table."""
    return list(FAIXAS_IRRF_2025)


@pytest.fixture
def tabela_2025():
    return TABELA_IRRF_2025


@pytest.fixture
def cartorios() -> list[Cartorio]:
    """Three offices; the first two share a responsible party."""
    return [
        Cartorio(
            id="c1",
            nome="Cartório do 1º Ofício",
            codigo="001",
            codigo_cns="12.345-6",
            responsavel_nome="Maria Souza",
            responsavel_cpf="111.111.111-11",
            comarca="Centro",
            cidade="Macapá",
        ),
        Cartorio(
            id="c2",
            nome="Cartório de Registro Civil de Santana",
            codigo="002",
            responsavel_nome="Maria Souza",
            responsavel_cpf="11111111111",
            comarca="Santana",
        ),
        Cartorio(
            id="c3",
            nome="Serventia de Oiapoque",
            codigo="003",
            codigo_cns="65.432-1",
            responsavel_nome="João Lima",
            responsavel_cpf="222.222.222-22",
            comarca="Oiapoque",
        ),
    ]


def _pagamento(
    id: str,
    cartorio_id: str,
    mes: int,
    ano: int,
    bruto: str,
    irrf: str = "0",
    data: date | None = None,
    status: StatusPagamento = StatusPagamento.EM_ANDAMENTO,
    tipo_historico: TipoHistorico = TipoHistorico.REPASSE,
    cartorio_nome: str = "",
    responsavel_nome: str = "",
) -> Pagamento:
    """Build a payment with a consistent net value."""
    return Pagamento(
        id=id,
        cartorio_id=cartorio_id,
        cartorio_nome=cartorio_nome,
        responsavel_nome=responsavel_nome,
        cpf="111.111.111-11",
        data=data or date(ano, mes, 10),
        mes_referencia=mes,
        ano_referencia=ano,
        valor_bruto=Decimal(bruto),
        valor_irrf=Decimal(irrf),
        status=status,
        tipo_historico=tipo_historico,
    )


@pytest.fixture
def novo_pagamento():
    """Factory for payments with a consistent net value."""
    return _pagamento


@pytest.fixture
def pagamentos() -> list[Pagamento]:
    """Payments for the three offices, deliberately out of order."""
    return [
        _pagamento("p1", "c2", 3, 2025, "3000.00", "68.56", status=StatusPagamento.PAGO),
        _pagamento("p2", "c1", 1, 2025, "2000.00", status=StatusPagamento.PAGO),
        _pagamento("p3", "c1", 10, 2025, "5000.00", "479.00", status=StatusPagamento.PENDENTE),
        _pagamento("p4", "c1", 2, 2025, "1000.00", data=date(2025, 2, 20)),
        _pagamento("p5", "c1", 2, 2025, "500.00", data=date(2025, 2, 5)),
        _pagamento("p6", "c3", 1, 2024, "2500.00", "18.06"),
    ]


@pytest.fixture
def admin() -> PerfilUsuario:
    return PerfilUsuario(id="u-admin", nome_completo="Admin", papel=Papel.ADMIN)


@pytest.fixture
def operador() -> PerfilUsuario:
    return PerfilUsuario(id="u-op", nome_completo="Operador", papel=Papel.USER)


@pytest.fixture
def snapshot_dict() -> dict:
    """Minimal exported snapshot document."""
    return {
        "irrf_brackets": [
            {"id": 2, "year": 2025, "min_value": 2259.21, "max_value": 2826.65,
             "rate": 0.075, "deduction": 169.44},
            {"id": 1, "year": 2025, "min_value": 0, "max_value": 2259.20,
             "rate": 0, "deduction": 0},
            {"id": 3, "year": 2025, "min_value": 2826.66, "max_value": None,
             "rate": 0.15, "deduction": 381.44},
        ],
        "notaries": [
            {"id": 1, "name": "Cartório A", "responsible_name": "Maria Souza",
             "responsible_cpf": "111.111.111-11", "comarca": "Centro"},
            {"id": 2, "name": "Cartório B", "responsible_name": "Maria Souza",
             "responsible_cpf": "11111111111", "comarca": "Santana"},
        ],
        "payments": [
            {"id": "a", "notary_id": 1, "notary_name": "Cartório A", "cpf": "111.111.111-11",
             "date": "2025-02-10", "month_reference": "02", "year_reference": 2025,
             "gross_value": 3000.00, "irrf_value": 68.56, "status": "PAGO"},
            {"id": "b", "notary_id": 2, "notary_name": "Cartório B", "cpf": "11111111111",
             "date": "2025-01-10", "month_reference": "1", "year_reference": 2025,
             "gross_value": 1000.00, "irrf_value": 0, "net_value": 1000.00},
        ],
        "profiles": [
            {"id": "u-admin", "email": "admin@frc.org", "full_name": "Admin", "role": "admin"},
            {"id": "u-op", "email": "op@frc.org", "full_name": "Operador", "role": "user"},
        ],
        "notary_access": [
            {"user_id": "u-op", "notary_id": 2},
        ],
    }


@pytest.fixture
def snapshot_file(tmp_path: Path, snapshot_dict: dict) -> Path:
    """Write the snapshot document to a temporary file."""
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(snapshot_dict), encoding="utf-8")
    return path
