"""Entry point de desarrollo (sin instalar el paquete).

`python -m main fetch` desde la raíz equivale al script `meow`: el código vive
en `src/`, que se añade al `sys.path` antes de importar la CLI.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main(argv: list[str] | None = None) -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from cli.main import app  # noqa: PLC0415

    app(args=argv, prog_name="meow")


if __name__ == "__main__":
    main()
