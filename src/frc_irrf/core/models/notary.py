"""Notary office (serventia) model."""

from datetime import date
from typing import Optional

from pydantic import BaseModel, Field

from frc_irrf.core.models.enums import StatusCartorio, Vinculo
from frc_irrf.shared.validators import somente_digitos


class Cartorio(BaseModel):
    """Civil-registry office linked to a responsible party (CPF)."""

    id: str = Field(..., description="Notary office identifier")
    nome: str = Field(..., description="Office name")
    codigo: str = Field(default="", description="Internal code")
    codigo_cns: str = Field(default="", description="CNS code")
    responsavel_nome: str = Field(..., description="Current responsible party")
    responsavel_cpf: str = Field(..., description="Responsible party CPF")
    comarca: str = Field(default="")
    status: StatusCartorio = Field(default=StatusCartorio.ATIVO)

    # Location
    endereco: str = Field(default="")
    cidade: Optional[str] = Field(default=None)
    uf: Optional[str] = Field(default=None)
    cep: Optional[str] = Field(default=None)
    telefone: Optional[str] = Field(default=None)
    email: Optional[str] = Field(default=None)
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)

    # Default linkage used when registering new payments
    vinculo_padrao: Optional[Vinculo] = Field(default=None)
    data_vinculo: Optional[date] = Field(default=None)

    @property
    def chave_responsavel(self) -> str:
        """Return the responsible CPF digits, used as grouping key."""
        return somente_digitos(self.responsavel_cpf) or self.responsavel_cpf

    @property
    def geolocalizado(self) -> bool:
        """Check if both coordinates are present."""
        return self.latitude is not None and self.longitude is not None

    @property
    def ativo(self) -> bool:
        return self.status == StatusCartorio.ATIVO

    model_config = {"frozen": True}
