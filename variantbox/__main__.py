import sys

from variantbox.cli import main


sys.exit(main())
