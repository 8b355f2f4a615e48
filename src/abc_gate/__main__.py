"""Allow running as ``python -m abc_gate``."""

from .cli import app

if __name__ == "__main__":
    app()
