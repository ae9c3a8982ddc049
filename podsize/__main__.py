import sys

from podsize.main import main

sys.exit(main())
