import sys

from .calculator import main

sys.exit(main())
