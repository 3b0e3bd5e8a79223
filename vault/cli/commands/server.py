"""Server commands."""

import cyclopts
import logfire
import uvicorn

from vault.config import Config

app = cyclopts.App(name="server", help="Run the vault HTTP server")


@app.command
def run(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Run the server in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
    """
    config = Config()  # type: ignore[call-arg]
    logfire.configure(
        service_name="timelock-vault",
        service_version=config.server.version,
        send_to_logfire="if-token-present",
    )
    uvicorn.run(
        "vault.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
        log_config=None,  # Keep the logging set up by create_app
    )
