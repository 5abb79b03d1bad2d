"""Tests for Cédula C grouping."""

from datetime import date
from decimal import Decimal

from frc_irrf.core.models import Cartorio
from frc_irrf.core.services import (
    agrupar_para_cedula,
    filtrar_cartorios,
    ordenar_cronologicamente,
)


class TestAgruparParaCedula:
    """Tests for agrupar_para_cedula."""

    def test_shared_responsible_gives_one_group(self, novo_pagamento):
        """Two offices of the same CPF produce one statement."""
        a = Cartorio(id="A", nome="A", responsavel_nome="Maria", responsavel_cpf="111.111.111-11")
        b = Cartorio(id="B", nome="B", responsavel_nome="Maria", responsavel_cpf="111.111.111-11")
        pagamentos = [
            novo_pagamento("pa", "A", 1, 2025, "1000"),
            novo_pagamento("pb", "B", 1, 2025, "2000"),
        ]

        grupos = agrupar_para_cedula([a, b], ["A", "B"], pagamentos)

        assert len(grupos) == 1
        assert len(grupos[0].pagamentos) == 2
        assert grupos[0].total_bruto == Decimal("3000")

    def test_cpf_formatting_ignored(self, cartorios, pagamentos):
        """Formatted and bare CPFs are the same person."""
        grupos = agrupar_para_cedula(cartorios, ["c1", "c2"], pagamentos)
        assert len(grupos) == 1
        grupo = grupos[0]
        assert grupo.cpf_responsavel == "111.111.111-11"
        assert grupo.nome_responsavel == "Maria Souza"
        assert [c.id for c in grupo.cartorios] == ["c1", "c2"]

    def test_distinct_responsibles(self, cartorios, pagamentos):
        """One group per CPF, in first-seen order."""
        grupos = agrupar_para_cedula(cartorios, ["c3", "c1"], pagamentos)
        assert [g.cpf_responsavel for g in grupos] == ["111.111.111-11", "222.222.222-22"]
        assert [p.id for p in grupos[1].pagamentos] == ["p6"]

    def test_chronological_order(self, cartorios, pagamentos):
        """Numeric months, then payment date within the month."""
        grupo = agrupar_para_cedula(cartorios, ["c1", "c2"], pagamentos)[0]
        assert [p.id for p in grupo.pagamentos] == ["p2", "p5", "p4", "p1", "p3"]

    def test_totals(self, cartorios, pagamentos):
        grupo = agrupar_para_cedula(cartorios, ["c1", "c2"], pagamentos)[0]
        assert grupo.total_bruto == Decimal("11500.00")
        assert grupo.total_irrf == Decimal("547.56")
        assert grupo.total_liquido == Decimal("10952.44")

    def test_year_filter(self, cartorios, pagamentos):
        """Payments of other years are left out; the group remains."""
        grupo = agrupar_para_cedula(cartorios, ["c3"], pagamentos, ano=2025)[0]
        assert grupo.pagamentos == ()
        assert grupo.total_bruto == Decimal("0")

    def test_office_without_payments(self, cartorios):
        grupos = agrupar_para_cedula(cartorios, ["c1"], [])
        assert len(grupos) == 1
        assert grupos[0].total_liquido == Decimal("0")

    def test_nothing_selected(self, cartorios, pagamentos):
        assert agrupar_para_cedula(cartorios, [], pagamentos) == []
        assert agrupar_para_cedula(cartorios, ["desconhecido"], pagamentos) == []

    def test_header_fields(self, cartorios, pagamentos):
        """Names, CNS codes and comarcas are joined for the header."""
        grupo = agrupar_para_cedula(cartorios, ["c1", "c2"], pagamentos)[0]
        assert grupo.nomes_cartorios == (
            "Cartório do 1º Ofício / Cartório de Registro Civil de Santana"
        )
        assert grupo.codigos_cns == "12.345-6"
        assert grupo.comarcas == "Centro / Santana"


class TestOrdenarCronologicamente:
    """Tests for ordenar_cronologicamente."""

    def test_month_two_before_ten(self, novo_pagamento):
        """Regression: months must not sort as strings."""
        outubro = novo_pagamento("out", "c1", "10", 2025, "100", data=date(2025, 10, 1))
        fevereiro = novo_pagamento("fev", "c1", "2", 2025, "100", data=date(2025, 2, 1))
        assert [p.id for p in ordenar_cronologicamente([outubro, fevereiro])] == ["fev", "out"]

    def test_year_first(self, novo_pagamento):
        a = novo_pagamento("a", "c1", 1, 2026, "100")
        b = novo_pagamento("b", "c1", 12, 2025, "100")
        assert [p.id for p in ordenar_cronologicamente([a, b])] == ["b", "a"]


class TestFiltrarCartorios:
    """Tests for the office selection search."""

    def test_empty_search(self, cartorios):
        assert filtrar_cartorios(cartorios, "") == cartorios

    def test_by_name(self, cartorios):
        assert [c.id for c in filtrar_cartorios(cartorios, "santana")] == ["c2"]

    def test_by_responsible(self, cartorios):
        assert [c.id for c in filtrar_cartorios(cartorios, "MARIA")] == ["c1", "c2"]

    def test_by_cpf_as_typed(self, cartorios):
        """CPF matches the stored value as a substring."""
        assert [c.id for c in filtrar_cartorios(cartorios, "222.222")] == ["c3"]
