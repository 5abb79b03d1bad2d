"""Rich console configuration for CLI output."""

from rich.console import Console
from rich.theme import Theme

THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "red bold",
        "success": "green",
        "muted": "dim",
        "header": "bold blue",
        "value": "bold",
        "currency": "green",
        "irrf": "red",
        "status_pago": "green",
        "status_pendente": "red",
        "status_andamento": "blue",
    }
)

# Global console instance
console = Console(theme=THEME)


def print_error(message: str) -> None:
    """Print error message."""
    console.print(f"[error]Erro:[/error] {message}")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[warning]Aviso:[/warning] {message}")


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[success]{message}[/success]")
