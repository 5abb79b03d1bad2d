"""Main Typer application for FRC IRRF."""

import logging
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.panel import Panel
from rich.table import Table

from frc_irrf import __version__
from frc_irrf.cli.console import console, print_error, print_success, print_warning
from frc_irrf.config import Settings, get_settings
from frc_irrf.core.aggregators import (
    agrupar_por_periodo,
    aplicar_janela,
    distribuicao_status,
    filtrar_pagamentos,
    resumo_financeiro,
)
from frc_irrf.core.calculators import calcular_irrf, para_decimal, validar_tabela
from frc_irrf.core.models import (
    Cartorio,
    GrupoCedula,
    Genero,
    Pagamento,
    StatusPagamento,
    TipoHistorico,
    TipoLote,
)
from frc_irrf.core.services import (
    agrupar_para_cedula,
    cartorios_visiveis,
    filtrar_cartorios,
    pagamentos_visiveis,
    sem_vinculo,
)
from frc_irrf.infrastructure import DataStore
from frc_irrf.shared.exceptions import FRCError
from frc_irrf.shared.formatters import (
    format_currency,
    format_date,
    format_percentage,
    format_rate,
)

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="frc-irrf",
    help="Cálculo de IRRF, painel de repasses e Cédula C do Fundo de Apoio ao Registro Civil",
    add_completion=True,
    no_args_is_help=True,
)

DadosOption = Annotated[
    Optional[Path],
    typer.Option(
        "--dados",
        "-d",
        help="Snapshot JSON do banco (padrão: FRC_ARQUIVO_DADOS)",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
    ),
]

UsuarioOption = Annotated[
    Optional[str],
    typer.Option("--usuario", "-u", help="Aplica a visibilidade do perfil informado"),
]

STATUS_STYLES = {
    StatusPagamento.PAGO: "[status_pago]PAGO[/status_pago]",
    StatusPagamento.PENDENTE: "[status_pendente]PENDENTE[/status_pendente]",
    StatusPagamento.EM_ANDAMENTO: "[status_andamento]EM ANDAMENTO[/status_andamento]",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"FRC IRRF v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-V",
            help="Mostra a versão e sai",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Mostra logs de depuração"),
    ] = False,
) -> None:
    """FRC IRRF - Gestão de repasses e retenção de imposto de renda."""
    settings = get_settings()
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level.upper(), logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _carregar_store(dados: Optional[Path], settings: Settings) -> DataStore:
    """Load the snapshot given on the command line or in FRC_ARQUIVO_DADOS."""
    caminho = dados or settings.arquivo_dados
    if caminho is None:
        logger.debug("Sem snapshot: usando apenas as tabelas IRRF embutidas")
        return DataStore()
    return DataStore.from_file(caminho)


def _ano_padrao(store: DataStore, settings: Settings) -> int:
    """Configured year, else the latest year with a table, else the current year."""
    if settings.ano_padrao is not None:
        return settings.ano_padrao
    anos = store.anos_disponiveis()
    return anos[-1] if anos else date.today().year


def _visiveis(
    store: DataStore, usuario: Optional[str]
) -> tuple[list[Cartorio], list[Pagamento]]:
    """Offices and payments visible to a user (everything when no user)."""
    if usuario is None:
        return store.cartorios, store.pagamentos

    perfil = store.perfil(usuario)
    acessos = store.acessos(usuario)
    if sem_vinculo(perfil, acessos):
        print_warning(
            f"O usuário {perfil.nome_completo or perfil.id} não possui cartório vinculado. "
            "Solicite o vínculo ao administrador do sistema."
        )
    return (
        cartorios_visiveis(perfil, store.cartorios, acessos),
        pagamentos_visiveis(perfil, store.pagamentos, acessos),
    )


def _parse_valor(texto: str) -> Optional[Decimal]:
    """Accept "2500.00", "2500,00" and "2.500,00"."""
    texto = texto.strip()
    if "," in texto:
        texto = texto.replace(".", "").replace(",", ".")
    return para_decimal(texto)


@app.command()
def calcular(
    valor: Annotated[str, typer.Argument(help="Valor bruto (ex.: 2500,00)")],
    ano: Annotated[
        Optional[int], typer.Option("--ano", "-a", help="Ano da tabela IRRF")
    ] = None,
    dados: DadosOption = None,
) -> None:
    """Calcula o IRRF retido sobre um valor bruto."""
    try:
        settings = get_settings()
        store = _carregar_store(dados, settings)
        ano = ano if ano is not None else _ano_padrao(store, settings)

        bruto = _parse_valor(valor)
        if bruto is None:
            print_error(f"Valor inválido: {valor}")
            raise typer.Exit(1)

        faixas = store.buscar_faixas(ano)
        resultado = calcular_irrf(bruto, faixas)

        if resultado.faixa is not None:
            faixa = resultado.faixa
            limite = (
                format_currency(faixa.valor_maximo)
                if faixa.valor_maximo is not None
                else "sem limite"
            )
            descricao_faixa = (
                f"{format_currency(faixa.valor_minimo)} a {limite} "
                f"({format_rate(faixa.aliquota)}, dedução {format_currency(faixa.deducao)})"
            )
        else:
            descricao_faixa = "-"

        console.print()
        console.print(
            Panel.fit(
                f"[header]Ano da tabela:[/header] {ano}\n"
                f"[header]Valor bruto:[/header] {format_currency(bruto)}\n"
                f"[header]Faixa:[/header] {descricao_faixa}\n"
                f"[header]IRRF:[/header] [irrf]{format_currency(resultado.valor)}[/irrf]\n"
                f"[header]Valor líquido:[/header] [currency]{format_currency(bruto - resultado.valor)}[/currency]",
                title="Cálculo de IRRF",
                border_style="blue",
            )
        )

        if not faixas:
            print_warning(f"Tabela IRRF ausente para o ano {ano}: nenhum imposto foi calculado.")
        elif not resultado.encontrou and bruto > 0:
            print_warning(f"Valor fora de todas as faixas da tabela {ano}: verifique a tabela.")

    except FRCError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Erro inesperado: {e}")
        raise typer.Exit(1)


@app.command()
def tabela(
    ano: Annotated[
        Optional[int], typer.Option("--ano", "-a", help="Ano da tabela IRRF")
    ] = None,
    dados: DadosOption = None,
) -> None:
    """Exibe a tabela progressiva de um ano e verifica sua integridade."""
    try:
        settings = get_settings()
        store = _carregar_store(dados, settings)
        ano = ano if ano is not None else _ano_padrao(store, settings)
        faixas = store.buscar_faixas(ano)

        anos = ", ".join(str(a) for a in store.anos_disponiveis()) or "-"
        console.print()
        console.print(f"[muted]Anos com tabela cadastrada: {anos}[/muted]")

        table = Table(show_header=True, header_style="bold", title=f"Tabela IRRF {ano}")
        table.add_column("Faixa", style="dim")
        table.add_column("De", justify="right")
        table.add_column("Até", justify="right")
        table.add_column("Alíquota", justify="right")
        table.add_column("Dedução", justify="right")

        for faixa in faixas:
            table.add_row(
                faixa.id,
                format_currency(faixa.valor_minimo),
                format_currency(faixa.valor_maximo) if faixa.valor_maximo is not None else "-",
                format_rate(faixa.aliquota),
                format_currency(faixa.deducao),
            )
        console.print(table)
        console.print("[muted]Fórmula: (Base × Alíquota) - Dedução[/muted]")

        problemas = validar_tabela(faixas)
        console.print()
        if problemas:
            console.print("[header]Inconsistências na tabela:[/header]")
            for problema in problemas:
                console.print(f"  [warning]•[/warning] {problema.descricao}")
        else:
            print_success("Tabela consistente: faixas contínuas de 0 ao infinito.")

    except FRCError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        print_error(f"Erro inesperado: {e}")
        raise typer.Exit(1)


@app.command()
def painel(
    dados: DadosOption = None,
    janela: Annotated[
        str,
        typer.Option("--janela", "-j", help="Período do gráfico: 6meses, ano:AAAA ou tudo"),
    ] = "6meses",
    usuario: UsuarioOption = None,
) -> None:
    """Resumo financeiro, série por competência e distribuição de status."""
    try:
        settings = get_settings()
        store = _carregar_store(dados, settings)
        _, pagamentos = _visiveis(store, usuario)

        resumo = resumo_financeiro(pagamentos)
        console.print()
        console.print(
            Panel.fit(
                f"[header]Total repassado (bruto):[/header] [currency]{format_currency(resumo.bruto)}[/currency]\n"
                f"[header]IRRF retido:[/header] [irrf]{format_currency(resumo.irrf)}[/irrf]\n"
                f"[header]Total líquido:[/header] {format_currency(resumo.liquido)}\n"
                f"[header]Pagamentos:[/header] {resumo.quantidade}",
                title="Painel FRC",
                border_style="blue",
            )
        )

        serie = aplicar_janela(agrupar_por_periodo(pagamentos), janela, settings.janela_periodos)
        table = Table(show_header=True, header_style="bold", title="Repasses por competência")
        table.add_column("Competência")
        table.add_column("Bruto", justify="right", style="green")
        table.add_column("IRRF", justify="right", style="red")
        for ponto in serie:
            table.add_row(ponto.rotulo, format_currency(ponto.bruto), format_currency(ponto.irrf))
        console.print(table)

        distribuicao = distribuicao_status(pagamentos)
        console.print()
        console.print("[header]Status dos pagamentos:[/header]")
        for status, percentual in distribuicao.items():
            console.print(f"  {STATUS_STYLES[status]}: {format_percentage(percentual)}")

    except ValueError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except FRCError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        print_error(f"Erro inesperado: {e}")
        raise typer.Exit(1)


@app.command()
def pagamentos(
    dados: DadosOption = None,
    ano: Annotated[
        Optional[int], typer.Option("--ano", "-a", help="Ano de referência")
    ] = None,
    busca: Annotated[
        str, typer.Option("--busca", "-b", help="Busca por cartório ou responsável")
    ] = "",
    genero: Annotated[
        Optional[Genero], typer.Option("--genero", "-g", help="Gênero do pagamento")
    ] = None,
    historico: Annotated[
        Optional[TipoHistorico],
        typer.Option("--historico", "-t", help="Tipo de histórico (ex.: REPASSE, DEA)"),
    ] = None,
    lote: Annotated[
        Optional[TipoLote], typer.Option("--lote", "-l", help="Tipo de lote")
    ] = None,
    usuario: UsuarioOption = None,
) -> None:
    """Lista os pagamentos com filtros."""
    try:
        settings = get_settings()
        store = _carregar_store(dados, settings)
        _, visiveis = _visiveis(store, usuario)

        filtrados = filtrar_pagamentos(
            visiveis,
            genero=genero,
            tipo_historico=historico,
            busca=busca,
            ano=ano,
            tipo_lote=lote,
        )

        table = Table(show_header=True, header_style="bold")
        table.add_column("Status")
        table.add_column("Competência")
        table.add_column("Data")
        table.add_column("Cartório", style="cyan", max_width=40)
        table.add_column("Responsável", max_width=30)
        table.add_column("Histórico")
        table.add_column("Bruto", justify="right")
        table.add_column("IRRF", justify="right", style="red")
        table.add_column("Líquido", justify="right", style="green")

        for p in filtrados:
            table.add_row(
                STATUS_STYLES[p.status],
                p.lote,
                format_date(p.data),
                p.cartorio_nome,
                p.responsavel_nome,
                p.tipo_historico.value,
                format_currency(p.valor_bruto),
                format_currency(p.valor_irrf),
                format_currency(p.valor_liquido),
            )

        console.print()
        console.print(table)
        console.print(f"[muted]Exibindo {len(filtrados)} registros de {len(visiveis)}[/muted]")

    except FRCError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except Exception as e:
        print_error(f"Erro inesperado: {e}")
        raise typer.Exit(1)


def _mostrar_cedula(grupo: GrupoCedula, ano: Optional[int]) -> None:
    """Print one consolidated statement."""
    console.print()
    console.print(
        Panel.fit(
            f"[header]Responsável:[/header] {grupo.nome_responsavel}\n"
            f"[header]CPF:[/header] {grupo.cpf_responsavel}\n"
            f"[header]Cartório(s):[/header] {grupo.nomes_cartorios}\n"
            f"[header]Comarca(s):[/header] {grupo.comarcas}\n"
            f"[header]Código CNS:[/header] {grupo.codigos_cns or '-'}\n"
            f"[header]Ano-calendário:[/header] {ano if ano is not None else 'todos'}",
            title="Comprovante de Rendimentos e Retenção de IRRF - Cédula C",
            border_style="blue",
        )
    )

    table = Table(show_header=True, header_style="bold")
    table.add_column("Mês")
    table.add_column("Data")
    table.add_column("Cód.")
    table.add_column("Histórico")
    table.add_column("Bruto", justify="right")
    table.add_column("IRRF", justify="right", style="red")
    table.add_column("Líquido", justify="right", style="bold")

    for p in grupo.pagamentos:
        table.add_row(
            p.lote,
            format_date(p.data),
            p.codigo,
            p.tipo_historico.value,
            format_currency(p.valor_bruto),
            format_currency(p.valor_irrf) if p.valor_irrf > 0 else "-",
            format_currency(p.valor_liquido),
        )

    if grupo.pagamentos:
        table.add_row(
            "", "", "", "[bold]TOTAIS[/bold]",
            f"[bold]{format_currency(grupo.total_bruto)}[/bold]",
            f"[bold]{format_currency(grupo.total_irrf)}[/bold]",
            f"[bold]{format_currency(grupo.total_liquido)}[/bold]",
        )
    console.print(table)

    if not grupo.pagamentos:
        console.print("[muted]Nenhum registro encontrado para este período.[/muted]")


@app.command()
def cedula(
    dados: DadosOption = None,
    cartorio: Annotated[
        Optional[list[str]],
        typer.Option("--cartorio", "-c", help="Id do cartório (repita para vários)"),
    ] = None,
    ano: Annotated[
        Optional[int], typer.Option("--ano", "-a", help="Ano-calendário dos pagamentos")
    ] = None,
    busca: Annotated[
        str, typer.Option("--busca", "-b", help="Seleciona os cartórios encontrados pela busca")
    ] = "",
    usuario: UsuarioOption = None,
) -> None:
    """Gera a Cédula C consolidada por responsável (CPF)."""
    try:
        settings = get_settings()
        store = _carregar_store(dados, settings)
        cartorios, pagamentos_visiveis_ = _visiveis(store, usuario)

        if cartorio:
            selecionados = list(cartorio)
        else:
            selecionados = [c.id for c in filtrar_cartorios(cartorios, busca)]

        grupos = agrupar_para_cedula(cartorios, selecionados, pagamentos_visiveis_, ano)
        if not grupos:
            print_warning("Nenhum cartório selecionado.")
            raise typer.Exit(1)

        for grupo in grupos:
            _mostrar_cedula(grupo, ano)

        console.print()
        console.print(
            f"[muted]{len(grupos)} cédula(s) para "
            f"{', '.join(g.cpf_responsavel for g in grupos)}[/muted]"
        )

    except FRCError as e:
        print_error(str(e))
        raise typer.Exit(1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Erro inesperado: {e}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
