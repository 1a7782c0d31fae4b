"""Shared fixtures: fake template checkouts and a reporter that records messages."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

WriteTree = Callable[[Path, dict[str, str]], None]


class RecordingReporter:
    def __init__(self) -> None:
        self.messages: list[tuple[str, str]] = []

    def step(self, message: str) -> None:
        self.messages.append(("step", message))

    def success(self, message: str) -> None:
        self.messages.append(("success", message))

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def warning(self, message: str) -> None:
        self.messages.append(("warning", message))

    def of(self, kind: str) -> list[str]:
        return [m for k, m in self.messages if k == kind]


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()


def _write_tree(root: Path, files: dict[str, str]) -> None:
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")


@pytest.fixture
def write_tree() -> WriteTree:
    return _write_tree


@pytest.fixture
def desktop_files() -> dict[str, str]:
    return {
        "package.json": '{\n  "name": "my-app",\n  "packageManager": "pnpm@9.12.0"\n}\n',
        "src-tauri/Cargo.toml": '[package]\nname = "my-app"\n\n[lib]\nname = "my_app_lib"\n',
        "src-tauri/Cargo.lock": '[[package]]\nname = "my-app"\nversion = "0.1.0"\n',
        "src-tauri/tauri.conf.json": (
            '{\n  "productName": "My App",\n  "identifier": "com.example.myapp",\n'
            '  "plugins": { "deep-link": { "desktop": { "schemes": ["my-app"] } } }\n}\n'
        ),
        "src-tauri/src/main.rs": "fn main() {\n    my_app_lib::run()\n}\n",
        "scripts/release.sh": "#!/bin/sh\necho releasing my-app\n",
        "scripts/rename-app.ts": "// generator only\n",
        "src/App.tsx": "export const title = 'My App'\n",
        "pnpm-lock.yaml": "lockfileVersion: '9.0'\n",
    }


@pytest.fixture
def web_files() -> dict[str, str]:
    return {
        "package.json": '{\n  "name": "my-app",\n  "packageManager": "pnpm@9.12.0"\n}\n',
        "astro.config.mjs": "// server build\nexport default { site: 'https://myapp.example.com' }\n",
        "astro.config.static.mjs": "// static build\nexport default { output: 'static' }\n",
        "wrangler.jsonc": '{ "name": "my-app", "d1_databases": [{ "binding": "MY_APP_DB" }] }\n',
        "wrangler.static.jsonc": '{ "name": "my-app" }\n',
        "config/site.config.ts": (
            "export const site = {\n"
            '  name: "My App",\n'
            '  brand: "ZeroStack",\n'
            '  description: "My App Description",\n'
            '  url: "https://myapp.example.com",\n'
            '  email: "hello@myapp.example.com",\n'
            "}\n"
        ),
        "src/lib/auth.ts": 'export const cookiePrefix = "my_app"\n',
        "src/lib/db.ts": "export const binding = 'MY_APP_DB'\n",
        "src/lib/email.ts": "export const from = 'hello@myapp.example.com'\n",
        "src/pages/index.astro": "<h1>My App</h1>\n",
        "src/pages/api/trpc/[trpc].ts": "export const prerender = false\n",
        "src/pages/blog/[slug].astro": "---\nexport const prerender = false\n---\n",
        "src/pages/blog/index.astro": "<h1>Blog</h1>\n",
        "src/trpc/router.ts": "export const router = {}\n",
        "drizzle.config.ts": "export default {}\n",
        "drizzle/0000_init.sql": "CREATE TABLE users (id TEXT);\n",
        "scripts/generate-app.ts": "// generator only\n",
        "pnpm-lock.yaml": "lockfileVersion: '9.0'\n",
    }
