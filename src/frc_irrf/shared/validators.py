"""CPF helpers for responsible-party identification."""

import re


def somente_digitos(valor: str | None) -> str:
    """Strip everything but digits ("123.456.789-00" -> "12345678900")."""
    if not valor:
        return ""
    return re.sub(r"\D", "", valor)


def validate_cpf(cpf: str) -> bool:
    """
    Validate Brazilian CPF check digits.

    Args:
        cpf: CPF string (can contain formatting characters)

    Returns:
        True if valid, False otherwise
    """
    cpf = somente_digitos(cpf)

    if len(cpf) != 11 or cpf == cpf[0] * 11:
        return False

    for tamanho in (9, 10):
        soma = sum(int(cpf[i]) * (tamanho + 1 - i) for i in range(tamanho))
        resto = soma % 11
        digito = 0 if resto < 2 else 11 - resto
        if digito != int(cpf[tamanho]):
            return False

    return True


def format_cpf(cpf: str) -> str:
    """Format CPF as XXX.XXX.XXX-XX (returned untouched if not 11 digits)."""
    digitos = somente_digitos(cpf)
    if len(digitos) != 11:
        return cpf
    return f"{digitos[:3]}.{digitos[3:6]}.{digitos[6:9]}-{digitos[9:]}"


def mask_cpf(cpf: str) -> str:
    """Mask CPF for display as ***.***.**X-XX."""
    digitos = somente_digitos(cpf)
    if len(digitos) != 11:
        return "***.***.***-**"
    return f"***.***.**{digitos[8]}-{digitos[9:]}"
