"""Development helper for minting caller tokens."""

import sys

import cyclopts
from rich.console import Console

from vault.config import Config
from vault.domain.auth.service.token import TokenService

app = cyclopts.App(name="token", help="Issue bearer tokens for a caller identity")

console = Console()


@app.default
def issue(identity: str) -> None:
    """Print a bearer token whose subject is IDENTITY.

    Args:
        identity: Caller identity the token authenticates as.
    """
    config = Config()  # type: ignore[call-arg]
    if not config.auth.jwt.secret:
        console.print("[red]Error:[/red] VAULT_AUTH__JWT__SECRET is not set", style="bold")
        sys.exit(1)
    print(TokenService(_config=config.auth.jwt).create_access_token(identity))
