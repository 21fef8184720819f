import sys

from mushaf.cli import main

sys.exit(main())
