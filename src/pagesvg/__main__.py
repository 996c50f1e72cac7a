import sys

from pagesvg.cli import main

sys.exit(main())
