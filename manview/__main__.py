"""Allow `python -m manview`."""
import sys

from .cli import main

sys.exit(main())
