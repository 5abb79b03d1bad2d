"""Domain services for FRC IRRF."""

from frc_irrf.core.services.acesso import (
    cartorios_geolocalizados,
    cartorios_visiveis,
    pagamentos_visiveis,
    sem_vinculo,
)
from frc_irrf.core.services.cedula_c import (
    agrupar_para_cedula,
    filtrar_cartorios,
    ordenar_cronologicamente,
)
from frc_irrf.core.services.pagamentos import (
    HISTORICO_POR_GENERO,
    RegistroPagamento,
    atualizar_status,
    calcular_valor_bruto,
    registrar_pagamento,
)

__all__ = [
    "cartorios_geolocalizados",
    "cartorios_visiveis",
    "pagamentos_visiveis",
    "sem_vinculo",
    "agrupar_para_cedula",
    "filtrar_cartorios",
    "ordenar_cronologicamente",
    "HISTORICO_POR_GENERO",
    "RegistroPagamento",
    "atualizar_status",
    "calcular_valor_bruto",
    "registrar_pagamento",
]
