import sys

from chessbox.app import main

sys.exit(main())
