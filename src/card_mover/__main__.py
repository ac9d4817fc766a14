"""Allow running as ``python -m card_mover``."""

from card_mover.action.cli import main

if __name__ == "__main__":
    main()
