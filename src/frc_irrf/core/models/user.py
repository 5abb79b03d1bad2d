"""User profile model."""

from pydantic import BaseModel, Field

from frc_irrf.core.models.enums import Papel


class PerfilUsuario(BaseModel):
    """Application user with a role."""

    id: str = Field(..., description="User identifier")
    email: str = Field(default="")
    nome_completo: str = Field(default="")
    papel: Papel = Field(default=Papel.USER)

    @property
    def admin(self) -> bool:
        return self.papel == Papel.ADMIN

    model_config = {"frozen": True}
