"""Console entry point for ``apa-refs``."""

from apa_references.presentation.cli.app import app

if __name__ == "__main__":
    app()
