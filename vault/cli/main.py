"""Main CLI application using Cyclopts."""

import cyclopts

from vault.cli.commands import config, server, token

app = cyclopts.App(
    name="vault",
    help="Timelock Vault - CLI",
)

app.command(server.app, name="server")
app.command(config.app, name="config")
app.command(token.app, name="token")
