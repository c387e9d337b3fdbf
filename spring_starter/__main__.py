import sys

from spring_starter.session import main

sys.exit(main())
