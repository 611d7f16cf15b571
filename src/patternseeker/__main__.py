"""Allow `python -m patternseeker`."""

import sys

from patternseeker.cli import main

if __name__ == "__main__":
    sys.exit(main())
