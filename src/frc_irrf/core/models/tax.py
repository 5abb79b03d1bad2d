"""IRRF bracket table models."""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from frc_irrf.core.models.enums import TipoProblemaTabela


class FaixaIRRF(BaseModel):
    """A single progressive bracket: tax = base * aliquota - deducao."""

    id: str = Field(..., description="Bracket identifier")
    valor_minimo: Decimal = Field(..., description="Inclusive lower bound")
    valor_maximo: Optional[Decimal] = Field(
        default=None, description="Inclusive upper bound (None = open top bracket)"
    )
    aliquota: Decimal = Field(..., description="Rate applied to the full base (0.075 = 7,5%)")
    deducao: Decimal = Field(default=Decimal("0"), description="Parcela a deduzir")

    @field_validator("valor_minimo", "valor_maximo", "aliquota", "deducao", mode="before")
    @classmethod
    def float_via_str(cls, v):
        """Convert floats through str so 2259.2 stays 2259.2."""
        if isinstance(v, float):
            return str(v)
        return v

    @property
    def aberta(self) -> bool:
        """Return True for the open-ended top bracket."""
        return self.valor_maximo is None

    def contem(self, valor: Decimal) -> bool:
        """Check if value falls inside this bracket (both ends inclusive)."""
        if valor < self.valor_minimo:
            return False
        return self.valor_maximo is None or valor <= self.valor_maximo

    model_config = {"frozen": True}


class TabelaIRRF(BaseModel):
    """Brackets for one calendar year, ascending by valor_minimo."""

    ano: int = Field(..., description="Calendar year")
    faixas: tuple[FaixaIRRF, ...] = Field(default_factory=tuple)

    @property
    def vazia(self) -> bool:
        """Return True when the year has no brackets."""
        return not self.faixas

    model_config = {"frozen": True}


class ResultadoIRRF(BaseModel):
    """Withholding result with match information.

    `encontrou` distinguishes a legitimate zero (exempt bracket) from a
    zero caused by a missing table or a value outside every bracket.
    """

    valor: Decimal = Field(default=Decimal("0.00"), description="Withheld tax")
    encontrou: bool = Field(default=False, description="A bracket matched the base")
    faixa: Optional[FaixaIRRF] = Field(default=None, description="Matched bracket")

    model_config = {"frozen": True}


class ProblemaTabela(BaseModel):
    """An integrity problem found in a bracket table."""

    tipo: TipoProblemaTabela = Field(..., description="Type of problem")
    descricao: str = Field(..., description="Human-readable description")
    faixa_id: Optional[str] = Field(default=None, description="Related bracket")

    model_config = {"frozen": True}
