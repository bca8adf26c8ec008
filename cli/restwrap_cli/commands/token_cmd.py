from __future__ import annotations

import typer

from .. import console
from ..config import load_config
from ..http import make_storage

app = typer.Typer(help="Manage the stored bearer token.")


@app.command("show")
def show_token(
        reveal: bool = typer.Option(False, "--reveal", help="Print the token itself."),
):
    cfg = load_config()
    token = make_storage().get_item(cfg.bearer_token_key)
    if not token:
        console.console.print(f"{cfg.bearer_token_key}=(empty)")
        return
    console.console.print(f"{cfg.bearer_token_key}={token if reveal else '(set)'}")


@app.command("set")
def set_token(
        token: str = typer.Option(..., "--token", prompt=True, hide_input=True, help="Bearer token."),
):
    token = token.strip()
    if not token:
        console.err("Token cannot be empty.")
        raise typer.Exit(code=2)
    cfg = load_config()
    storage = make_storage()
    storage.set_item(cfg.bearer_token_key, token)
    console.ok(f"Token saved to {storage.path}.")


@app.command("clear")
def clear_token():
    cfg = load_config()
    storage = make_storage()
    storage.remove_item(cfg.bearer_token_key)
    console.ok(f"Token cleared from {storage.path}.")
