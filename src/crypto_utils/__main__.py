"""Main entry point for the crypto_utils package."""
from crypto_utils.cli import cli


def main():
    """Main entry point function."""
    cli()


if __name__ == "__main__":
    main()
