#!/usr/bin/env python3
# scripts/gen_csr.py
import sys

from csrgen.cli import main


if __name__ == "__main__":
    sys.exit(main())
