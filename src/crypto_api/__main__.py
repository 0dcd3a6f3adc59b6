"""Entry point for the crypto API."""

import uvicorn

from crypto_utils import config


def main():
    """Start the API server."""
    uvicorn.run("crypto_api.api:app", host=config.api_host(), port=config.api_port(), reload=True)


if __name__ == "__main__":
    main()
