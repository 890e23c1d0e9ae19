#!/usr/bin/env python3
# csrgen/cli.py
import argparse
import logging
import sys

from csrgen.common.config import load_settings
from csrgen.common.errors import ArgumentError, CsrGenError
from csrgen import pipeline

log = logging.getLogger("csrgen")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="csrgen",
        description="Generate an RSA key, a PKCS#10 CSR and a CSR manifest in ./<name>/.",
    )
    parser.add_argument("name", nargs="?", help="Identifier; used as the CN and the output directory name")
    parser.add_argument("--bits", type=int, default=None, help="RSA key size (default: CSRGEN_KEY_SIZE or 2048)")
    parser.add_argument("--template", default=None, help="Manifest template (default: CSRGEN_TEMPLATE or template.yaml)")
    parser.add_argument("--out-dir", default=None, help="Directory to create <name>/ in (default: CSRGEN_OUTPUT_ROOT or .)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    try:
        if not args.name:
            raise ArgumentError("Name was not supplied. Please supply name as first argument")
        settings = load_settings(
            key_size=args.bits,
            template_path=args.template,
            output_root=args.out_dir,
            log_level="DEBUG" if args.verbose else None,
        )
    except ArgumentError as e:
        logging.basicConfig(format="%(asctime)s %(message)s")
        log.error("%s", e)
        return 1

    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(message)s")

    try:
        pipeline.run(args.name, settings)
    except CsrGenError as e:
        log.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
