"""Version command."""

from .. import __version__
from . import app


@app.command()
def version() -> None:
    """Print the abc-gate version."""
    print(__version__)
