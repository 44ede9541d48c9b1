"""Allow `python -m kaprekar`."""

import sys

from kaprekar.main import main

sys.exit(main())
