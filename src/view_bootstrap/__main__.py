import sys

from view_bootstrap.cli import main

if __name__ == "__main__":  # pragma: no cover - module entry
    sys.exit(main())
