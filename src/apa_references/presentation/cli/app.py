"""Thin CLI wrapper — Typer commands around the APA 7 formatter.

Reads reference records from JSON files, formats or validates them and
renders the results with Rich.
"""

from __future__ import annotations

import json
import logging
import shutil
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from apa_references.presentation.cli.formatters import (
    console,
    error_message,
    json_panel,
    reference_panel,
    success_panel,
    validation_table,
)

app = typer.Typer(
    name="apa-refs",
    help="📚 Formatador de referências APA 7ª edição",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Gerenciar a configuração do formatador",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-V", help="Mostrar logs de depuração")
    ] = False,
) -> None:
    """Formatador de referências APA 7ª edição."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _load_references(source: str):
    """Read references from *source* or exit with a readable error."""
    from apa_references.application.error_messages import format_validation_errors
    from apa_references.domain.errors import APAFormatterError
    from apa_references.infrastructure.json_reader import JsonReferenceReader

    path = Path(source)
    if not path.exists():
        error_message(f"Arquivo não encontrado: {source}")
        raise typer.Exit(code=1)

    try:
        return JsonReferenceReader().load(path)
    except ValidationError as e:
        for msg in format_validation_errors(e.errors()):
            error_message(msg)
        raise typer.Exit(code=1)
    except (APAFormatterError, ValueError) as e:
        error_message(str(e))
        raise typer.Exit(code=1)


def _build_formatter(config: Optional[str], lenient: bool = False):
    from apa_references.config import get_config, load_config
    from apa_references.domain.errors import ConfigurationError
    from apa_references.formatter import APAFormatter

    try:
        cfg = load_config(Path(config)) if config else get_config()
    except (FileNotFoundError, ValidationError, ConfigurationError) as e:
        error_message(str(e))
        raise typer.Exit(code=1)
    if lenient:
        return APAFormatter(cfg, validacaoEstrita=False)
    return APAFormatter(cfg)


# ---------------------------------------------------------------------------
# apa-refs format
# ---------------------------------------------------------------------------


@app.command("format")
def format_command(
    source: Annotated[str, typer.Argument(help="Arquivo JSON com uma ou mais referências")],
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Caminho do arquivo JSON de configuração"),
    ] = None,
    lenient: Annotated[
        bool,
        typer.Option("--lenient", "-l", help="Formatar mesmo com campos obrigatórios ausentes"),
    ] = False,
    as_json: Annotated[
        bool, typer.Option("--json", help="Imprimir o resultado como JSON")
    ] = False,
) -> None:
    """Formatar referências no estilo APA 7."""
    from apa_references.domain.errors import APAFormattingError

    references = _load_references(source)
    formatter = _build_formatter(config, lenient)

    results = []
    for index, ref in enumerate(references, start=1):
        try:
            results.append(formatter.format(ref))
        except APAFormattingError as e:
            error_message(f"Referência #{index} ({e.kind.value}, campo '{e.field}'): {e.message}")
            raise typer.Exit(code=1)

    if as_json:
        payload = [r.model_dump(mode="json", by_alias=True) for r in results]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    for index, result in enumerate(results, start=1):
        reference_panel(result, index if len(results) > 1 else None)


# ---------------------------------------------------------------------------
# apa-refs validate
# ---------------------------------------------------------------------------


@app.command()
def validate(
    source: Annotated[str, typer.Argument(help="Arquivo JSON com uma ou mais referências")],
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Caminho do arquivo JSON de configuração"),
    ] = None,
) -> None:
    """Verificar campos obrigatórios e recomendados das referências."""
    references = _load_references(source)
    formatter = _build_formatter(config)

    rows = []
    for index, ref in enumerate(references, start=1):
        label = f"#{index} {ref.ref_type}: {ref.title or '—'}"
        rows.append((label, formatter.validate(ref)))

    validation_table(rows)
    if not all(result.is_valid for _, result in rows):
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# apa-refs config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(
    config: Annotated[
        Optional[str],
        typer.Option("--config", "-c", help="Caminho do arquivo JSON de configuração"),
    ] = None,
) -> None:
    """Mostrar a configuração ativa (formatada)."""
    cfg = _build_formatter(config).config
    json_panel(cfg.model_dump_json(indent=2, by_alias=True))


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Nome do arquivo de destino")
    ] = "apa7_config.json",
) -> None:
    """Copiar a configuração padrão para o diretório atual para personalização."""
    from apa_references.config.loader import DEFAULT_CONFIG_PATH

    dest = Path(output)
    if dest.exists():
        console.print(f"[bold yellow]⚠️  O arquivo já existe:[/] {dest}")
        overwrite = typer.confirm("Deseja sobrescrevê-lo?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(DEFAULT_CONFIG_PATH, dest)
    success_panel(
        f"✅ Configuração copiada para: [bold green]{dest}[/]\n\n"
        "Edite este arquivo e use-o com [bold]--config[/]:\n"
        f'  apa-refs format refs.json --config "{dest}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[
        str, typer.Argument(help="Caminho do arquivo JSON de configuração a validar")
    ],
) -> None:
    """Validar um arquivo JSON de configuração."""
    from apa_references.config import load_config
    from apa_references.domain.errors import ConfigurationError

    path = Path(config_file)
    if not path.exists():
        error_message(f"Arquivo não encontrado: {path}")
        raise typer.Exit(code=1)

    try:
        cfg = load_config(path)
    except (ValidationError, ConfigurationError) as e:
        error_message(f"Erro de validação: {e}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Configuração válida\n\n"
        f"  Idioma padrão: [cyan]{cfg.default_language.value}[/]\n"
        f"  Validação estrita: [cyan]{'sim' if cfg.strict_validation else 'não'}[/]\n"
        f"  et al. a partir de: [cyan]{cfg.et_al.min_authors}[/] autores",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
