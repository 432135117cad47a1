"""Launch Nova Defense: ``python nova-defense.py [OPTIONS]``."""

import sys

from main import main

if __name__ == "__main__":
    sys.exit(main())
