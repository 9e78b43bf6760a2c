import sys

from pyRemoveMo.main import main

sys.exit(main())
