import sys

from canada_spends.cli import main

sys.exit(main())
