"""Module entrypoint for running the demo CLI as ``python -m iterprogress``."""

from __future__ import annotations

from iterprogress.cli import main


if __name__ == "__main__":
    main()
