"""Astro web app template, with an optional static mode that parks the server code."""

from __future__ import annotations

from pathlib import Path

from create_builtby_app.cli._types import Answers, Question, QuestionKind
from create_builtby_app.cli.templates._base import app_name_question, is_domain
from create_builtby_app.core.moves import Move, apply_moves
from create_builtby_app.core.naming import to_kebab_case, to_snake_case, to_title_words
from create_builtby_app.core.replace import Replacement, replace_in_files
from create_builtby_app.core.report import Reporter

REPO = "builtby-win/web"

SERVER_TEMPLATE_DIR = "_server-template"

FILES: tuple[str, ...] = (
    "package.json",
    "astro.config.mjs",
    "wrangler.jsonc",
    "config/site.config.ts",
    "src/lib/auth.ts",
    "src/lib/db.ts",
    "src/lib/schema.ts",
    "src/layouts/base-layout.astro",
    ".env.example",
    "README.md",
)

# (report label, moves) applied in order when the project has no API routes.
STATIC_MODE_MOVES: tuple[tuple[str, tuple[Move, ...]], ...] = (
    (
        "astro.config.mjs (static mode)",
        (
            Move("astro.config.mjs", "astro.config.server.mjs"),
            Move("astro.config.static.mjs", "astro.config.mjs"),
        ),
    ),
    (
        "wrangler.jsonc (static mode)",
        (
            Move("wrangler.jsonc", "wrangler.server.jsonc"),
            Move("wrangler.static.jsonc", "wrangler.jsonc"),
        ),
    ),
    (
        f"Moved API routes to {SERVER_TEMPLATE_DIR}/",
        (
            Move("src/pages/api", f"{SERVER_TEMPLATE_DIR}/pages/api"),
            Move("src/pages/dev", f"{SERVER_TEMPLATE_DIR}/pages/dev"),
            Move("src/pages/blog/[slug].astro", f"{SERVER_TEMPLATE_DIR}/pages/blog/[slug].astro"),
        ),
    ),
    (
        f"Moved server libraries to {SERVER_TEMPLATE_DIR}/",
        (
            Move("src/lib/auth.ts", f"{SERVER_TEMPLATE_DIR}/lib/auth.ts"),
            Move("src/lib/auth-client.ts", f"{SERVER_TEMPLATE_DIR}/lib/auth-client.ts"),
            Move("src/lib/db.ts", f"{SERVER_TEMPLATE_DIR}/lib/db.ts"),
            Move("src/lib/schema.ts", f"{SERVER_TEMPLATE_DIR}/lib/schema.ts"),
            Move("src/lib/email.ts", f"{SERVER_TEMPLATE_DIR}/lib/email.ts"),
            Move("src/trpc", f"{SERVER_TEMPLATE_DIR}/trpc"),
        ),
    ),
    (
        f"Moved database migrations to {SERVER_TEMPLATE_DIR}/",
        (
            Move("drizzle.config.ts", f"{SERVER_TEMPLATE_DIR}/drizzle.config.ts"),
            Move("drizzle", f"{SERVER_TEMPLATE_DIR}/drizzle"),
        ),
    ),
)


QUESTIONS: tuple[Question, ...] = (
    app_name_question("my-awesome-app"),
    Question(
        name="productName",
        message="Product name (shown in UI)",
        default=lambda answers: to_title_words(str(answers.get("appName") or "")),
    ),
    Question(
        name="description",
        message="Short description (1 sentence)",
        default=lambda answers: f"{answers.get('productName') or 'My App'} - Built with love",
    ),
    Question(
        name="domain",
        message='Domain name (e.g., "example.com")',
        validate=is_domain,
        error="Must be a valid domain",
    ),
    Question(
        name="needsApiRoutes",
        message="Do you need API routes (authentication, database, tRPC)?",
        kind=QuestionKind.CONFIRM,
        default=True,
    ),
)


def replacements(answers: Answers) -> list[Replacement]:
    """Placeholder rules in application order.

    The bare domain rule runs before the URL and email rules, so those two only
    match text the earlier rules did not already rewrite. Likewise ``My App``
    runs before ``My App Description``.
    """
    snake = to_snake_case(str(answers["appName"]))
    product_name = str(answers["productName"])
    domain = str(answers["domain"])
    return [
        Replacement("my-app", to_kebab_case(str(answers["appName"]))),
        Replacement("my_app", snake),
        Replacement("MY_APP_DB", f"{snake.upper()}_DB"),
        Replacement("ZeroStack", product_name),
        Replacement("My App", product_name),
        Replacement("My App Description", str(answers["description"])),
        Replacement("myapp.example.com", domain),
        Replacement("https://myapp.example.com", f"https://{domain}"),
        Replacement("hello@myapp.example.com", f"hello@{domain}"),
    ]


def configure_static_mode(project_dir: Path, reporter: Reporter) -> None:
    """Swap in the static configs and park server-only code under ``_server-template/``."""
    reporter.step("Configuring static mode...")
    for label, moves in STATIC_MODE_MOVES:
        if apply_moves(project_dir, moves):
            reporter.success(label)


def transform(project_dir: Path, answers: Answers, reporter: Reporter) -> None:
    replace_in_files(project_dir, FILES, replacements(answers), reporter)

    if not answers["needsApiRoutes"]:
        configure_static_mode(project_dir, reporter)
