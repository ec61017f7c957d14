import sys

from pksig.cli import main

sys.exit(main())
