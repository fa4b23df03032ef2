import sys

from trip_hub.cli import main

sys.exit(main())
