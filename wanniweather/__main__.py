import sys

from wanniweather.cli import main

sys.exit(main())
