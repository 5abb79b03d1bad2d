"""Aggregation and consolidated statement (Cédula C) models."""

from decimal import Decimal

from pydantic import BaseModel, Field

from frc_irrf.core.models.notary import Cartorio
from frc_irrf.core.models.payment import Pagamento, Periodo


class ResumoFinanceiro(BaseModel):
    """Gross / IRRF / net totals over a payment collection."""

    bruto: Decimal = Field(default=Decimal("0"))
    irrf: Decimal = Field(default=Decimal("0"))
    liquido: Decimal = Field(default=Decimal("0"))
    quantidade: int = Field(default=0, ge=0)

    model_config = {"frozen": True}


class PontoSerie(BaseModel):
    """One point of the per-period chart series."""

    periodo: Periodo = Field(..., description="Reference (year, month)")
    bruto: Decimal = Field(default=Decimal("0"))
    irrf: Decimal = Field(default=Decimal("0"))

    @property
    def rotulo(self) -> str:
        """Return display label MM/AAAA."""
        return self.periodo.rotulo

    model_config = {"frozen": True}


class GrupoCedula(BaseModel):
    """Consolidated statement for one responsible party.

    A person responsible for several offices receives one statement
    covering the payments of all of them.
    """

    cpf_responsavel: str = Field(..., description="Responsible party CPF")
    nome_responsavel: str = Field(..., description="Responsible party name")
    cartorios: tuple[Cartorio, ...] = Field(default_factory=tuple)
    pagamentos: tuple[Pagamento, ...] = Field(
        default_factory=tuple, description="Payments in chronological order"
    )
    total_bruto: Decimal = Field(default=Decimal("0"))
    total_irrf: Decimal = Field(default=Decimal("0"))
    total_liquido: Decimal = Field(default=Decimal("0"))

    @property
    def nomes_cartorios(self) -> str:
        """Return office names joined by " / "."""
        return " / ".join(c.nome for c in self.cartorios)

    @property
    def codigos_cns(self) -> str:
        """Return non-empty CNS codes joined by " / "."""
        return " / ".join(c.codigo_cns for c in self.cartorios if c.codigo_cns)

    @property
    def comarcas(self) -> str:
        """Return unique comarcas (first-seen order) joined by " / "."""
        return " / ".join(dict.fromkeys(c.comarca for c in self.cartorios))

    model_config = {"frozen": True}
