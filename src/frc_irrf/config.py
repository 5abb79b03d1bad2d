"""Application settings loaded from environment variables."""

from decimal import Decimal
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings

from frc_irrf.core.rules.tax_constants import JANELA_PADRAO_PERIODOS, VALOR_VIA_1, VALOR_VIA_2


class Settings(BaseSettings):
    """Application configuration from FRC_* environment variables."""

    arquivo_dados: Optional[Path] = None
    ano_padrao: Optional[int] = None
    janela_periodos: int = JANELA_PADRAO_PERIODOS
    valor_via1: Decimal = VALOR_VIA_1
    valor_via2: Decimal = VALOR_VIA_2
    log_level: str = "WARNING"

    model_config = {"env_prefix": "FRC_", "env_file": ".env", "extra": "ignore"}


def get_settings() -> Settings:
    """Read settings from the current environment."""
    return Settings()
