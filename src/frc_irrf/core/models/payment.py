"""Payment models for FRC disbursements."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any, NamedTuple, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from frc_irrf.core.models.enums import (
    Genero,
    StatusPagamento,
    TipoHistorico,
    TipoLote,
    Vinculo,
)
from frc_irrf.shared.formatters import format_lote

CENTAVO = Decimal("0.01")


class Periodo(NamedTuple):
    """Reference period (year, month). Tuple ordering is chronological."""

    ano: int
    mes: int

    @property
    def rotulo(self) -> str:
        """Return display label MM/AAAA."""
        return format_lote(self.mes, self.ano)


def parse_mes(valor: Any) -> int:
    """Parse a reference month ("02", "2", 2) into 1..12.

    Raises:
        ValueError: If the value is not a month number
    """
    if isinstance(valor, bool):
        raise ValueError(f"Mês de referência inválido: {valor!r}")
    if isinstance(valor, str):
        valor = valor.strip()
        if not valor.isdigit():
            raise ValueError(f"Mês de referência inválido: {valor!r}")
    try:
        mes = int(valor)
    except (TypeError, ValueError):
        raise ValueError(f"Mês de referência inválido: {valor!r}") from None
    if not 1 <= mes <= 12:
        raise ValueError(f"Mês de referência fora de 1..12: {mes}")
    return mes


class Pagamento(BaseModel):
    """One disbursement to a notary office for a reference month."""

    id: str = Field(..., description="Payment identifier")
    cartorio_id: str = Field(..., description="Owning notary office")
    cartorio_nome: str = Field(default="", description="Notary office name at payment time")
    codigo: str = Field(default="", description="Notary office code")
    responsavel_nome: str = Field(default="", description="Responsible party name")
    cpf: str = Field(..., description="Responsible party CPF at payment time")
    data: date = Field(..., description="Calendar payment date")
    mes_referencia: int = Field(..., description="Reference month (1..12)")
    ano_referencia: int = Field(..., description="Reference year")
    comarca: str = Field(default="")
    valor_bruto: Decimal = Field(..., ge=0, description="Gross value")
    valor_irrf: Decimal = Field(default=Decimal("0"), ge=0, description="Withheld IRRF")
    valor_liquido: Decimal = Field(..., description="Net value (bruto - irrf)")
    tipo_historico: TipoHistorico = Field(default=TipoHistorico.REPASSE)
    status: StatusPagamento = Field(default=StatusPagamento.EM_ANDAMENTO)
    motivo_pendencia: Optional[str] = Field(default=None)

    # Business fields
    tipo_lote: Optional[TipoLote] = Field(default=None)
    genero: Optional[Genero] = Field(default=None)
    vinculo: Optional[Vinculo] = Field(default=None)
    qtd_via1: int = Field(default=0, ge=0)
    qtd_via2: int = Field(default=0, ge=0)
    municipio: Optional[str] = Field(default=None)

    # Financial compliance (NE / DL / OB)
    ne_empenho: Optional[str] = Field(default=None)
    dl_liquidacao: Optional[str] = Field(default=None)
    ob_ordem_bancaria: Optional[str] = Field(default=None)

    @model_validator(mode="before")
    @classmethod
    def derive_valor_liquido(cls, data: Any) -> Any:
        """Fill valor_liquido from bruto - irrf when absent."""
        if isinstance(data, dict) and data.get("valor_liquido") is None:
            bruto = data.get("valor_bruto")
            irrf = data.get("valor_irrf") or 0
            if bruto is None:
                return data
            try:
                liquido = Decimal(str(bruto)) - Decimal(str(irrf))
            except (InvalidOperation, ValueError):
                # Field validation reports the bad value
                return data
            data = {**data, "valor_liquido": liquido}
        return data

    @field_validator("valor_bruto", "valor_irrf", "valor_liquido", mode="before")
    @classmethod
    def float_via_str(cls, v):
        """Convert floats through str so 1950.1 stays 1950.1."""
        if isinstance(v, float):
            return str(v)
        return v

    @field_validator("valor_liquido")
    @classmethod
    def quantize_valor_liquido(cls, v: Decimal) -> Decimal:
        """Store net value in cents (3885.2200000000003 -> 3885.22)."""
        return v.quantize(CENTAVO, rounding=ROUND_HALF_UP)

    @field_validator("mes_referencia", mode="before")
    @classmethod
    def validate_mes(cls, v: Any) -> int:
        """Accept "02", "2" or 2."""
        return parse_mes(v)

    @model_validator(mode="after")
    def check_valor_liquido(self) -> "Pagamento":
        """Enforce liquido == bruto - irrf, to the cent."""
        esperado = (self.valor_bruto - self.valor_irrf).quantize(CENTAVO, rounding=ROUND_HALF_UP)
        if self.valor_liquido != esperado:
            raise ValueError(
                f"Valor líquido {self.valor_liquido} difere de "
                f"bruto - IRRF ({esperado})"
            )
        return self

    @property
    def periodo(self) -> Periodo:
        """Return the reference period."""
        return Periodo(self.ano_referencia, self.mes_referencia)

    @property
    def lote(self) -> str:
        """Return reference label MM/AAAA."""
        return self.periodo.rotulo

    model_config = {"frozen": True}
