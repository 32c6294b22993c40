"""Efemérides entry point."""

import asyncio
import logging
import os
import sys

from dotenv import find_dotenv, load_dotenv

from .cli import run_cli
from .config import config_from_env

SUBCOMMANDS = ("fetch", "favoritos")


def main() -> None:
    """Main entry point."""
    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(
        level=os.getenv("EFEMERIDES_LOG_LEVEL", "WARNING").upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Fail early on a bad environment
    try:
        config_from_env()
    except ValueError as e:
        print(f"❌ Error: {e}")
        print("Revisa tu archivo .env o las variables de entorno")
        sys.exit(2)

    if len(sys.argv) > 1 and sys.argv[1] in (*SUBCOMMANDS, "-h", "--help"):
        from .commands import run_command

        sys.exit(run_command(sys.argv[1:]))

    asyncio.run(run_cli())


if __name__ == "__main__":
    main()
