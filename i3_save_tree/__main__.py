import sys

from i3_save_tree.run import main

sys.exit(main())
