import sys

from jointcall.main import main

sys.exit(main())
