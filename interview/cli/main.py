"""Command line entry point: run the API server or apply migrations."""

import cyclopts

app = cyclopts.App(
    name="interview",
    help="Interview Experience Service",
)


@app.command
def serve(
    host: str = "0.0.0.0",
    port: int = 8000,
) -> None:
    """Run the API server in the foreground.

    Args:
        host: Host to bind to.
        port: Port to listen on.
    """
    # Lazy imports - only load heavy deps when actually starting server
    import uvicorn

    from interview.config import Config
    from interview.infrastructure.persistence.migrate import run_migrations

    config = Config()  # type: ignore[call-arg]
    if config.database.auto_migrate:
        print("Running database migrations...")
        run_migrations(config.database.url)

    uvicorn.run(
        "interview.application.api.rest.app:create_app",
        factory=True,
        host=host,
        port=port,
    )


@app.command
def migrate() -> None:
    """Apply pending database migrations."""
    from interview.config import Config
    from interview.infrastructure.persistence.migrate import run_migrations

    config = Config()  # type: ignore[call-arg]
    run_migrations(config.database.url)
    print("Migrations complete.")


if __name__ == "__main__":
    app()
