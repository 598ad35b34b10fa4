import sys

from chain_order.cli import main

if __name__ == "__main__":
    sys.exit(main())
