import sys

from mil1750a.cli import main

sys.exit(main())
