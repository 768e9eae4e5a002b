import sys

from lidarviewer.main import main

sys.exit(main())
