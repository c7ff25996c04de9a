import sys

from teacrypt.cli import main

sys.exit(main())
