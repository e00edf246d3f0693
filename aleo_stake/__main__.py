import sys

from aleo_stake.cli import main

sys.exit(main())
