from __future__ import annotations

import os

import typer

from .. import console
from ..config import config_path, default_config, load_config, normalize_host, save_config

app = typer.Typer(help="Manage local settings (~/.config/restwrap/config.toml).")


@app.command("init")
def init_settings(
        force: bool = typer.Option(False, "--force", help="Overwrite existing config."),
        host: str = typer.Option(
            ...,
            "--host",
            prompt="API host",
            help="API host like http://127.0.0.1:8000",
        ),
):
    path = config_path()
    if os.path.exists(path) and not force:
        console.info(f"Config already exists: {path}")
        console.info("Use --force to overwrite.")
        return

    cfg = default_config()
    cfg.host = normalize_host(host, warn=True)
    if not cfg.host:
        console.err("Host cannot be empty.")
        raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Config written: {saved}")


@app.command("show")
def show_settings():
    cfg = load_config()
    console.console.print(f"host={cfg.host} bearer_token_key={cfg.bearer_token_key}")


@app.command("set")
def set_setting(
        host: str | None = typer.Option(None, "--host", help="Set API host."),
        bearer_token_key: str | None = typer.Option(
            None, "--bearer-token-key", help="Storage key the bearer token is kept under."
        ),
):
    cfg = load_config()
    if host is not None:
        cfg.host = normalize_host(host, warn=True)
        if not cfg.host:
            console.err("Host cannot be empty.")
            raise typer.Exit(code=2)
    if bearer_token_key is not None:
        cfg.bearer_token_key = bearer_token_key.strip()
        if not cfg.bearer_token_key:
            console.err("Bearer token key cannot be empty.")
            raise typer.Exit(code=2)
    saved = save_config(cfg)
    console.ok(f"Settings updated: {saved}")
