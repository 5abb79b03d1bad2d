"""Role-based visibility over notary offices and their payments.

Administrators see every office. Regular users see only the offices
linked to them in the access list (notary_access).
"""

from collections.abc import Collection, Iterable

from frc_irrf.core.models.notary import Cartorio
from frc_irrf.core.models.payment import Pagamento
from frc_irrf.core.models.user import PerfilUsuario


def cartorios_visiveis(
    perfil: PerfilUsuario,
    cartorios: Iterable[Cartorio],
    acessos: Collection[str],
) -> list[Cartorio]:
    """Return the offices the user may see."""
    if perfil.admin:
        return list(cartorios)
    return [c for c in cartorios if c.id in acessos]


def pagamentos_visiveis(
    perfil: PerfilUsuario,
    pagamentos: Iterable[Pagamento],
    acessos: Collection[str],
) -> list[Pagamento]:
    """Return the payments of the offices the user may see."""
    if perfil.admin:
        return list(pagamentos)
    return [p for p in pagamentos if p.cartorio_id in acessos]


def sem_vinculo(perfil: PerfilUsuario, acessos: Collection[str]) -> bool:
    """Check if a regular user has no linked office (dashboard warning)."""
    return not perfil.admin and not acessos


def cartorios_geolocalizados(cartorios: Iterable[Cartorio]) -> list[Cartorio]:
    """Return offices with both coordinates set."""
    return [c for c in cartorios if c.geolocalizado]
