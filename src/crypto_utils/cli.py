import os
import sys
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from crypto_utils import config, registry
from crypto_utils.algorithms import ALGORITHMS, Algorithm
from crypto_utils.errors import CryptoUtilsError
from crypto_utils.log import configure_logging


ALGORITHM_CHOICE = click.Choice([a.value for a in Algorithm], case_sensitive=False)


def read_text(text: Optional[str]) -> str:
    """Use the argument if given, otherwise read everything from stdin."""
    if text is not None:
        return text
    if sys.stdin.isatty():
        return ""
    return sys.stdin.read().rstrip("\n")


def read_key(key: Optional[str], key_file: Optional[str]) -> Optional[str]:
    if key is not None and key_file is not None:
        raise click.UsageError("Use either --key or --key-file, not both")
    if key_file is not None:
        with open(key_file, "r", encoding="utf-8") as f:
            return f.read().strip()
    return key


def run(direction: registry.Direction, algorithm: str, text: Optional[str], key: Optional[str], key_file: Optional[str]):
    text = read_text(text)
    key = read_key(key, key_file)
    try:
        registry.check_request(algorithm, text, key, direction)
        if direction == "encrypt":
            result = registry.encrypt(algorithm, text, key)
        else:
            result = registry.decrypt(algorithm, text, key)
    except CryptoUtilsError as e:
        raise click.ClickException(str(e)) from e
    click.echo(result)


@click.group()
@click.option("--log-level", default=None, help="Log level (default: $CRYPTO_UTILS_LOG_LEVEL or INFO)")
@click.option("--log-format", type=click.Choice(config.LOG_FORMATS), default=None, help="Log renderer")
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str], log_format: Optional[str]):
    """Encrypt, decrypt and generate keys for AES, 3DES, RSA, XOR, Caesar and Vigenère."""
    ctx.obj = {"LOG_LEVEL": log_level, "LOG_FORMAT": log_format}
    try:
        configure_logging(log_level, log_format)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@cli.command()
@click.option("--algorithm", "-a", required=True, type=ALGORITHM_CHOICE)
@click.option("--key", "-k", help="Key text (the public key for RSA)")
@click.option("--key-file", type=click.Path(exists=True, dir_okay=False), help="Read the key from a file")
@click.argument("text", required=False)
def encrypt(algorithm: str, key: Optional[str], key_file: Optional[str], text: Optional[str]):
    """Encrypt TEXT (or stdin)."""
    run("encrypt", algorithm, text, key, key_file)


@cli.command()
@click.option("--algorithm", "-a", required=True, type=ALGORITHM_CHOICE)
@click.option("--key", "-k", help="Key text (the private key for RSA)")
@click.option("--key-file", type=click.Path(exists=True, dir_okay=False), help="Read the key from a file")
@click.argument("text", required=False)
def decrypt(algorithm: str, key: Optional[str], key_file: Optional[str], text: Optional[str]):
    """Decrypt TEXT (or stdin)."""
    run("decrypt", algorithm, text, key, key_file)


@cli.command()
@click.option("--algorithm", "-a", required=True, type=ALGORITHM_CHOICE)
@click.option("--length", "-l", type=int, default=None, help="Key length (XOR and Vigenère only)")
def keygen(algorithm: str, length: Optional[int]):
    """Generate a key for a symmetric or classical algorithm."""
    try:
        click.echo(registry.generate_key(algorithm, length))
    except CryptoUtilsError as e:
        raise click.ClickException(str(e)) from e


@cli.command()
@click.option("--public-out", type=click.Path(dir_okay=False, writable=True), help="Write the public key here")
@click.option("--private-out", type=click.Path(dir_okay=False, writable=True), help="Write the private key here")
def keypair(public_out: Optional[str], private_out: Optional[str]):
    """Generate an RSA-2048 keypair (base64 DER)."""
    future = registry.generate_keypair_future()
    click.echo("Generating RSA keypair...", err=True)
    pair = future.result()

    if public_out:
        with open(public_out, "w", encoding="utf-8") as f:
            f.write(pair.public_key + "\n")
    else:
        click.echo(f"public:  {pair.public_key}")

    if private_out:
        with open(private_out, "w", encoding="utf-8") as f:
            f.write(pair.private_key + "\n")
    else:
        click.echo(f"private: {pair.private_key}")


@cli.command("algorithms")
@click.option("--details", is_flag=True, help="Include the long description")
def list_algorithms(details: bool):
    """Show the supported algorithms and the key each one needs."""
    table = Table(title="Supported algorithms")
    table.add_column("Algorithm", style="bold", no_wrap=True)
    table.add_column("Name")
    table.add_column("Key")
    table.add_column("Output")
    table.add_column("Description")

    for info in ALGORITHMS.values():
        description = f"{info.description}\n{info.details}" if details else info.description
        table.add_row(info.algorithm.value, info.name, str(info.key_shape), str(info.encoding), description)

    Console().print(table)


@cli.command("serve")
@click.option("--host", default=None, help="Host to bind the server to (default: $CRYPTO_UTILS_API_HOST)")
@click.option("--port", default=None, type=int, help="Port to bind the server to (default: $CRYPTO_UTILS_API_PORT)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: Optional[str], port: Optional[int], reload: bool):
    """Start the HTTP API."""
    import uvicorn

    host = host or config.api_host()
    port = port or config.api_port()

    click.echo(f"Starting crypto API on http://{host}:{port}")
    click.echo("Available endpoints:")
    click.echo("  - GET  /api/algorithms - Supported algorithms")
    click.echo("  - POST /api/encrypt    - Encrypt text")
    click.echo("  - POST /api/decrypt    - Decrypt text")
    click.echo("  - POST /api/keys       - Generate a key")
    click.echo("  - POST /api/keypair    - Generate an RSA keypair")
    click.echo("\nPress Ctrl+C to stop the server")

    if reload:
        # The reloader imports the app in a child process, which only sees the environment.
        for name, value in (ctx.obj or {}).items():
            if value is not None:
                os.environ[f"{config.ENV_PREFIX}{name}"] = value
        uvicorn.run("crypto_api.api:app", host=host, port=port, reload=True)
    else:
        from crypto_api.api import app
        uvicorn.run(app, host=host, port=port, reload=False)


if __name__ == "__main__":
    cli()
