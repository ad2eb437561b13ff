import sys

from loudcheck.cli import main

sys.exit(main())
