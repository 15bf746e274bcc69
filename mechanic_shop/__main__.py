import sys

from mechanic_shop.main import main

sys.exit(main())
