"""Allow ``python -m consulta_ibge``."""

import sys

from consulta_ibge.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
