"""Typer CLI application for create-builtby-app."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import create_builtby_app
from create_builtby_app.cli._console import RichReporter
from create_builtby_app.cli._install import install_dependencies, next_steps
from create_builtby_app.cli._prompts import (
    collect_answers,
    prompt_package_manager,
    prompt_project_name,
    prompt_template,
)
from create_builtby_app.cli._renderer import render_project
from create_builtby_app.cli._types import Answer, PackageManager, Template
from create_builtby_app.core.errors import InvalidAnswerError, ScaffoldError, TemplateAccessError

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()

PURCHASE_URL = "https://polar.sh/builtby-win"

# Answer name -> command line option that presets it.
_PRESET_OPTIONS: dict[str, str] = {
    "appName": "--app-name",
    "productName": "--product-name",
    "bundleIdentifier": "--bundle-identifier",
    "description": "--description",
    "domain": "--domain",
    "needsApiRoutes": "--api-routes/--no-api-routes",
}


def _print_templates() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available templates")
    _console.print("[dim]│[/]")
    for t in Template:
        _console.print(f"[dim]│[/]  [bold cyan]{t.value:<10}[/] [bold]{t.label}[/]")
        _console.print(f"[dim]│[/]  {' ' * 10} [dim]{t.description}[/]")
        _console.print("[dim]│[/]")
    _console.print()


def _list_templates_callback(value: bool) -> None:
    if value:
        _print_templates()
        raise Exit()


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"create-builtby-app {create_builtby_app.__version__}")
        raise Exit()


def _cancel() -> Exit:
    _console.print("[bold red]■[/]  Cancelled")
    return Exit(code=1)


def _print_access_help(repo: str) -> None:
    _console.print()
    _console.print("[bold red]Error:[/] Could not access the template repository.")
    _console.print(f"[dim]Repository:[/] {repo}")
    _console.print()
    _console.print("This is a private template. To use it, you need to:")
    _console.print(f"  1. Purchase access at {PURCHASE_URL}")
    _console.print("  2. Accept the GitHub repository invitation")
    _console.print("  3. Make sure you are authenticated with GitHub (run: gh auth login)")
    _console.print()


def _echo_choice(question: str, display: str) -> None:
    _console.print(f"[bold green]◇[/]  {question}")
    _console.print(f"[dim]│[/]  {display}")
    _console.print("[dim]│[/]")


@app.command()
def create(
    project_name: Annotated[
        str | None, Argument(help="Name for the new project directory", show_default=False)
    ] = None,
    template_str: Annotated[
        str | None,
        Option(
            "--template",
            "-t",
            help="Project template. Run with --list-templates / -l to see all options.",
            show_default=False,
        ),
    ] = None,
    package_manager: Annotated[
        PackageManager | None,
        Option("--package-manager", "-p", help="Package manager used to install dependencies"),
    ] = None,
    app_name: Annotated[
        str | None, Option("--app-name", help="App name, e.g. focus-hook", show_default=False)
    ] = None,
    product_name: Annotated[
        str | None, Option("--product-name", help="Product name shown in the UI")
    ] = None,
    bundle_identifier: Annotated[
        str | None,
        Option("--bundle-identifier", help="Reverse DNS bundle identifier (desktop)"),
    ] = None,
    description: Annotated[
        str | None, Option("--description", help="Short description (web)")
    ] = None,
    domain: Annotated[str | None, Option("--domain", help="Domain name (web)")] = None,
    api_routes: Annotated[
        bool | None,
        Option(
            "--api-routes/--no-api-routes",
            help="Keep API routes, auth and database (web). --no-api-routes builds a static site.",
        ),
    ] = None,
    list_templates: Annotated[
        bool,
        Option(
            "--list-templates",
            "-l",
            help="List all available templates and exit.",
            callback=_list_templates_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
    version: Annotated[
        bool,
        Option(
            "--version",
            "-V",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new project from a builtby.win template."""
    template: Template | None = None
    if template_str is not None:
        try:
            template = Template(template_str)
        except ValueError:
            valid = ", ".join(f"'{t.value}'" for t in Template)
            _console.print()
            _console.print(
                f"[bold red]Error:[/] [bold]{escape(repr(template_str))}[/] is not a valid template."
            )
            _console.print(f"[dim]Valid values:[/] {valid}")
            _print_templates()
            raise Exit(code=2) from None

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  create-builtby-app v{create_builtby_app.__version__}")
    _console.print("[dim]│[/]")

    if project_name is None:
        project_name = prompt_project_name()
    if not project_name:
        raise _cancel()

    project_dir = Path(project_name).resolve()
    if project_dir.exists():
        _console.print(f"[bold red]Error:[/] Directory '{escape(project_name)}' already exists.")
        raise Exit(code=1)

    # Interactive prompts for missing options
    if template is None:
        template = prompt_template()
        if template is None:
            raise _cancel()
    else:
        _echo_choice("Which template?", template.label)

    preset: dict[str, Answer | None] = {
        "appName": app_name,
        "productName": product_name,
        "bundleIdentifier": bundle_identifier,
        "description": description,
        "domain": domain,
        "needsApiRoutes": api_routes,
    }
    given = {k: v for k, v in preset.items() if v is not None}
    asked = {q.name for q in template.questions}
    for name in sorted(given.keys() - asked):
        _console.print(
            f"[dim]│[/]  [yellow]Ignoring {_PRESET_OPTIONS[name]}: "
            f"not used by the {template.value} template[/]"
        )

    try:
        answers = collect_answers(template.questions, given)
    except InvalidAnswerError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=2) from None

    if len(answers) != len(template.questions):
        raise _cancel()

    if package_manager is None:
        package_manager = prompt_package_manager()
        if package_manager is None:
            raise _cancel()
    else:
        _echo_choice("Package manager", package_manager.label)

    reporter = RichReporter(_console)
    try:
        render_project(project_dir, template, answers, reporter)
    except TemplateAccessError as exc:
        _print_access_help(exc.repo)
        raise Exit(code=1) from None
    except (ScaffoldError, OSError, ValueError) as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=1) from None

    install_dependencies(project_dir, package_manager, reporter)

    _console.print("[dim]│[/]")
    _console.print("[bold cyan]●[/]  Done!")
    _console.print()
    _console.print("Next steps:")
    for command, explanation in next_steps(project_name, template, answers, package_manager):
        suffix = f" [dim]- {explanation}[/]" if explanation else ""
        _console.print(f"  [cyan]{escape(command)}[/]{suffix}")
    _console.print()
