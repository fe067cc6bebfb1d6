"""Allow running the CLI with ``python -m clawtank``."""

from clawtank.cli import main

main()
