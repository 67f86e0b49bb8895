"""Allow ``python -m propstyle``."""

from .cli import main

main()
