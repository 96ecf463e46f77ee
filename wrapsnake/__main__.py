import sys

from wrapsnake.app import main

sys.exit(main())
