"""Enumerations for FRC domain models."""

from enum import Enum


class StatusPagamento(str, Enum):
    """Payment audit workflow stage."""

    EM_ANDAMENTO = "EM ANDAMENTO"  # registered, awaiting analysis
    PENDENTE = "PENDENTE"  # inconsistency found, needs adjustment
    PAGO = "PAGO"  # audit concluded


class TipoHistorico(str, Enum):
    """Nature of the disbursement."""

    AJUDA_DE_CUSTO = "AJUDA DE CUSTO"
    DEA = "DEA"
    MESES_ANTERIORES = "MESES ANTERIORES"
    RENDA_MINIMA = "RENDA MINIMA"
    REPASSE = "REPASSE"
    COMPLEMENTACAO = "COMPLEMENTAÇÃO"


class Genero(str, Enum):
    """Payment genre (top-level tab of the payment table)."""

    ATOS_GRATUITOS = "ATOS_GRATUITOS"
    RENDA_MINIMA = "RENDA_MINIMA"
    AJUDA_CUSTO = "AJUDA_CUSTO"


class TipoLote(str, Enum):
    """Payment lot type."""

    PRINCIPAL = "PRINCIPAL"
    COMPLEMENTAR = "COMPLEMENTAR"


class Vinculo(str, Enum):
    """Role of the responsible party at the notary office."""

    TITULAR = "Titular"
    INTERINO = "Interino"
    INTERVENTOR = "Interventor"


class StatusCartorio(str, Enum):
    """Notary office status."""

    ATIVO = "ATIVO"
    INATIVO = "INATIVO"


class Papel(str, Enum):
    """User role."""

    ADMIN = "admin"
    USER = "user"


class TipoProblemaTabela(str, Enum):
    """Integrity problems found in a bracket table."""

    TABELA_VAZIA = "tabela_vazia"
    INICIO_DIFERENTE_DE_ZERO = "inicio_diferente_de_zero"
    LACUNA = "lacuna"
    SOBREPOSICAO = "sobreposicao"
    FAIXA_ABERTA_NAO_FINAL = "faixa_aberta_nao_final"
    SEM_FAIXA_ABERTA = "sem_faixa_aberta"
    LIMITES_INVERTIDOS = "limites_invertidos"
    ALIQUOTA_INVALIDA = "aliquota_invalida"
    DEDUCAO_NEGATIVA = "deducao_negativa"
