"""Read-only data store snapshot.

The remote store is exported as one JSON document:

    {
        "irrf_brackets": [{"id", "year", "min_value", "max_value", "rate", "deduction"}],
        "notaries": [...],
        "payments": [...],
        "profiles": [...],
        "notary_access": [{"user_id", "notary_id"}]
    }

Every key is optional. Without a file, the store holds only the built-in
IRRF tables.
"""

import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Optional

from frc_irrf.core.models import Cartorio, FaixaIRRF, Pagamento, PerfilUsuario, TabelaIRRF
from frc_irrf.core.rules.tax_constants import TABELAS_PADRAO
from frc_irrf.infrastructure.mappers import (
    carregar_linhas,
    linha_para_cartorio,
    linha_para_faixa,
    linha_para_pagamento,
    linha_para_perfil,
)
from frc_irrf.shared.exceptions import AccessDeniedError, DataLoadError

logger = logging.getLogger(__name__)


class DataStore:
    """In-memory snapshot of brackets, notaries, payments and access lists."""

    def __init__(
        self,
        tabelas: Optional[Mapping[int, TabelaIRRF]] = None,
        cartorios: Optional[list[Cartorio]] = None,
        pagamentos: Optional[list[Pagamento]] = None,
        perfis: Optional[list[PerfilUsuario]] = None,
        acessos: Optional[Mapping[str, frozenset[str]]] = None,
    ):
        self._tabelas = dict(TABELAS_PADRAO if tabelas is None else tabelas)
        self._cartorios = list(cartorios or [])
        self._pagamentos = list(pagamentos or [])
        self._perfis = {p.id: p for p in perfis or []}
        self._acessos = dict(acessos or {})

    @classmethod
    def from_dict(cls, dados: Mapping[str, Any]) -> "DataStore":
        """Build a store from an exported snapshot document.

        Null tables count as empty.

        Raises:
            DataLoadError: If a table is not a list
        """
        tabelas = (
            _montar_tabelas(_tabela(dados, "irrf_brackets"))
            if dados.get("irrf_brackets") is not None
            else None
        )

        cartorios = carregar_linhas(_tabela(dados, "notaries"), linha_para_cartorio, "notaries")
        pagamentos = carregar_linhas(_tabela(dados, "payments"), linha_para_pagamento, "payments")
        perfis = carregar_linhas(_tabela(dados, "profiles"), linha_para_perfil, "profiles")

        acessos: dict[str, set[str]] = {}
        for linha in _tabela(dados, "notary_access"):
            if not isinstance(linha, Mapping) or "user_id" not in linha or "notary_id" not in linha:
                logger.warning("notary_access: registro ignorado: %r", linha)
                continue
            acessos.setdefault(str(linha["user_id"]), set()).add(str(linha["notary_id"]))

        logger.info(
            "Snapshot carregado: %d tabela(s), %d cartório(s), %d pagamento(s), %d perfil(is)",
            len(tabelas) if tabelas is not None else len(TABELAS_PADRAO),
            len(cartorios),
            len(pagamentos),
            len(perfis),
        )
        return cls(
            tabelas=tabelas,
            cartorios=cartorios,
            pagamentos=pagamentos,
            perfis=perfis,
            acessos={k: frozenset(v) for k, v in acessos.items()},
        )

    @classmethod
    def from_file(cls, path: Path) -> "DataStore":
        """Load a snapshot JSON file.

        Raises:
            DataLoadError: If the file cannot be read or is not a JSON object
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                dados = json.load(f)
        except OSError as e:
            raise DataLoadError(f"Não foi possível ler {path}: {e}") from e
        except json.JSONDecodeError as e:
            raise DataLoadError(f"JSON inválido em {path}: {e}") from e

        if not isinstance(dados, dict):
            raise DataLoadError(f"{path}: o snapshot deve ser um objeto JSON")

        logger.debug("Lendo snapshot %s", path)
        return cls.from_dict(dados)

    # === Brackets ===

    def buscar_faixas(self, ano: int) -> list[FaixaIRRF]:
        """Brackets of a year, ascending by valor_minimo (empty if none)."""
        tabela = self._tabelas.get(ano)
        return list(tabela.faixas) if tabela else []

    def tabela(self, ano: int) -> TabelaIRRF:
        """Bracket table of a year (empty table if none registered)."""
        return self._tabelas.get(ano) or TabelaIRRF(ano=ano)

    def anos_disponiveis(self) -> list[int]:
        """Years with at least one bracket, ascending."""
        return sorted(ano for ano, tabela in self._tabelas.items() if not tabela.vazia)

    # === Records ===

    @property
    def cartorios(self) -> list[Cartorio]:
        return list(self._cartorios)

    @property
    def pagamentos(self) -> list[Pagamento]:
        return list(self._pagamentos)

    def cartorio(self, cartorio_id: str) -> Optional[Cartorio]:
        """Find a notary office by id."""
        return next((c for c in self._cartorios if c.id == cartorio_id), None)

    def perfil(self, usuario_id: str) -> PerfilUsuario:
        """Find a user profile.

        Raises:
            AccessDeniedError: If the user is unknown
        """
        try:
            return self._perfis[usuario_id]
        except KeyError:
            raise AccessDeniedError(f"Usuário desconhecido: {usuario_id}") from None

    def acessos(self, usuario_id: str) -> frozenset[str]:
        """Notary office ids linked to a user."""
        return self._acessos.get(usuario_id, frozenset())


def _montar_tabelas(linhas: Any) -> dict[int, TabelaIRRF]:
    """Group bracket rows by year, each table sorted by valor_minimo."""
    por_ano: dict[int, list[Mapping[str, Any]]] = {}
    for linha in linhas:
        if not isinstance(linha, Mapping):
            logger.warning("irrf_brackets: registro ignorado (não é um objeto)")
            continue
        try:
            ano = int(linha["year"])
        except (KeyError, TypeError, ValueError):
            logger.warning("irrf_brackets: registro sem ano válido ignorado (id=%s)", linha.get("id"))
            continue
        por_ano.setdefault(ano, []).append(linha)

    tabelas = {}
    for ano, linhas_ano in por_ano.items():
        faixas = carregar_linhas(linhas_ano, linha_para_faixa, f"irrf_brackets[{ano}]")
        faixas.sort(key=lambda f: f.valor_minimo)
        tabelas[ano] = TabelaIRRF(ano=ano, faixas=tuple(faixas))
    return tabelas


def _tabela(dados: Mapping[str, Any], chave: str) -> list[Any]:
    """Rows of one snapshot table; absent or null means no rows."""
    linhas = dados.get(chave) or []
    if not isinstance(linhas, list):
        raise DataLoadError(f"{chave}: esperada uma lista de registros, recebido {type(linhas).__name__}")
    return linhas
