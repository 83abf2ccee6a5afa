import sys

from battlesim.main import main

sys.exit(main())
