import sys

from mapwalk.cli import main

sys.exit(main())
