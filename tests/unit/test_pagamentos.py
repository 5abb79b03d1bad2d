"""Tests for payment registration and status workflow."""

from datetime import date
from decimal import Decimal

import pytest

from frc_irrf.core.models import (
    Genero,
    StatusPagamento,
    TabelaIRRF,
    TipoHistorico,
    TipoLote,
)
from frc_irrf.core.services import atualizar_status, calcular_valor_bruto, registrar_pagamento
from frc_irrf.shared.exceptions import StatusTransitionError, ValidationError


class TestCalcularValorBruto:
    """Tests for gross value from copy quantities."""

    def test_default_prices(self):
        """R$ 65,00 per 1st copy and R$ 21,00 per 2nd copy."""
        assert calcular_valor_bruto(10, 5) == Decimal("755.00")

    def test_custom_prices(self):
        assert calcular_valor_bruto(2, 1, Decimal("70"), Decimal("25")) == Decimal("165")

    def test_negative_quantity(self):
        with pytest.raises(ValidationError):
            calcular_valor_bruto(-1, 0)


class TestRegistrarPagamento:
    """Tests for registrar_pagamento."""

    def test_irrf_and_net_computed(self, cartorios, tabela_2025):
        """IRRF comes from the table and net = gross - IRRF."""
        registro = registrar_pagamento(
            cartorios[0],
            tabela_2025,
            mes=2,
            ano=2025,
            data=date(2025, 3, 5),
            qtd_via1=50,
            qtd_via2=10,
        )
        pagamento = registro.pagamento

        assert pagamento.valor_bruto == Decimal("3460.00")
        assert pagamento.valor_irrf == Decimal("137.56")
        assert pagamento.valor_liquido == pagamento.valor_bruto - pagamento.valor_irrf
        assert pagamento.status == StatusPagamento.EM_ANDAMENTO
        assert pagamento.tipo_historico == TipoHistorico.REPASSE
        assert pagamento.lote == "02/2025"
        assert registro.alerta is None

    @pytest.mark.parametrize(
        "qtd_via1,qtd_via2",
        [
            (0, 1), (1, 0), (34, 0), (35, 0), (40, 3), (43, 1),
            (57, 7), (63, 3), (71, 0), (72, 5), (150, 40),
        ],
    )
    def test_net_invariant_over_quantities(self, cartorios, tabela_2025, qtd_via1, qtd_via2):
        """Net equals gross minus IRRF across every bracket."""
        pagamento = registrar_pagamento(
            cartorios[0],
            tabela_2025,
            mes=3,
            ano=2025,
            data=date(2025, 4, 10),
            qtd_via1=qtd_via1,
            qtd_via2=qtd_via2,
        ).pagamento
        assert pagamento.valor_liquido == pagamento.valor_bruto - pagamento.valor_irrf
        assert pagamento.valor_irrf >= 0

    def test_quantities_from_float_history(self, cartorios, tabela_2025):
        """63 first copies and 3 second copies: 4158,00 gross, 272,78 IRRF."""
        pagamento = registrar_pagamento(
            cartorios[0], tabela_2025, mes=3, ano=2025, data=date(2025, 4, 10),
            qtd_via1=63, qtd_via2=3,
        ).pagamento
        assert pagamento.valor_bruto == Decimal("4158.00")
        assert pagamento.valor_irrf == Decimal("272.78")
        assert pagamento.valor_liquido == Decimal("3885.22")

    def test_copies_responsible_data(self, cartorios, tabela_2025):
        pagamento = registrar_pagamento(
            cartorios[0], tabela_2025, mes=1, ano=2025, data=date(2025, 1, 15), qtd_via1=1
        ).pagamento
        assert pagamento.cartorio_id == "c1"
        assert pagamento.cpf == "111.111.111-11"
        assert pagamento.responsavel_nome == "Maria Souza"
        assert pagamento.municipio == "Macapá"
        assert pagamento.id

    def test_explicit_gross_value(self, cartorios, tabela_2025):
        """Minimum income uses the given gross value and its history type."""
        registro = registrar_pagamento(
            cartorios[1],
            tabela_2025,
            mes=12,
            ano=2025,
            data=date(2025, 12, 20),
            valor_bruto=Decimal("5000.00"),
            genero=Genero.RENDA_MINIMA,
            tipo_lote=TipoLote.COMPLEMENTAR,
            pagamento_id="pm-1",
        )
        pagamento = registro.pagamento
        assert pagamento.id == "pm-1"
        assert pagamento.valor_irrf == Decimal("479.00")
        assert pagamento.tipo_historico == TipoHistorico.RENDA_MINIMA
        assert pagamento.tipo_lote == TipoLote.COMPLEMENTAR
        assert pagamento.qtd_via1 == 0

    def test_missing_table_sets_alert(self, cartorios):
        """No bracket means zero IRRF plus an alert for the operator."""
        registro = registrar_pagamento(
            cartorios[0],
            TabelaIRRF(ano=2030),
            mes=1,
            ano=2030,
            data=date(2030, 1, 10),
            valor_bruto=Decimal("5000"),
        )
        assert registro.pagamento.valor_irrf == Decimal("0")
        assert registro.pagamento.valor_liquido == Decimal("5000")
        assert "2030" in registro.alerta

    def test_exempt_value_has_no_alert(self, cartorios, tabela_2025):
        """A legitimate zero (exempt bracket) is not flagged."""
        registro = registrar_pagamento(
            cartorios[0], tabela_2025, mes=1, ano=2025, data=date(2025, 1, 10), qtd_via1=2
        )
        assert registro.pagamento.valor_irrf == Decimal("0.00")
        assert registro.alerta is None

    def test_table_year_mismatch(self, cartorios, tabela_2025):
        with pytest.raises(ValidationError):
            registrar_pagamento(
                cartorios[0], tabela_2025, mes=1, ano=2026, data=date(2026, 1, 10)
            )

    def test_invalid_month(self, cartorios, tabela_2025):
        with pytest.raises(ValidationError):
            registrar_pagamento(
                cartorios[0], tabela_2025, mes=13, ano=2025, data=date(2025, 1, 10)
            )

    def test_negative_gross(self, cartorios, tabela_2025):
        with pytest.raises(ValidationError):
            registrar_pagamento(
                cartorios[0],
                tabela_2025,
                mes=1,
                ano=2025,
                data=date(2025, 1, 10),
                valor_bruto=Decimal("-1"),
            )


class TestAtualizarStatus:
    """Tests for the audit workflow."""

    def test_pending_requires_reason(self, pagamentos):
        with pytest.raises(StatusTransitionError):
            atualizar_status(pagamentos[0], StatusPagamento.PENDENTE)
        with pytest.raises(StatusTransitionError):
            atualizar_status(pagamentos[0], StatusPagamento.PENDENTE, "   ")

    def test_pending_with_reason(self, pagamentos):
        atualizado = atualizar_status(pagamentos[0], StatusPagamento.PENDENTE, " Falta NE ")
        assert atualizado.status == StatusPagamento.PENDENTE
        assert atualizado.motivo_pendencia == "Falta NE"
        assert pagamentos[0].status == StatusPagamento.PAGO

    def test_other_status_clears_reason(self, pagamentos):
        pendente = atualizar_status(pagamentos[3], StatusPagamento.PENDENTE, "Divergência")
        pago = atualizar_status(pendente, StatusPagamento.PAGO, "ignorado")
        assert pago.status == StatusPagamento.PAGO
        assert pago.motivo_pendencia is None

    def test_status_transition_is_validation_error(self):
        assert issubclass(StatusTransitionError, ValidationError)
