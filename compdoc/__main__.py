"""Allow ``python -m compdoc``."""

from .cli import main

main()
