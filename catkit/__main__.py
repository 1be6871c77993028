import sys

from .cli import mycat_main

sys.exit(mycat_main())
