"""Allow ``python -m pptx_index``."""

import sys

from pptx_index.cli import main

if __name__ == "__main__":
    sys.exit(main())
