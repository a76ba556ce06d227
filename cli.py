#!/usr/bin/env python3
import argparse
import sys

from docgen.errors import DocGenError
from docgen.orchestrator import run_once
from docgen.settings import RunSettings


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate the documentation set from the AI doc-set config")
    parser.add_argument("--config", help="Path to the doc-set YAML config (default: $DOC_CONFIG_PATH)")
    parser.add_argument("--output", help="Output root for generated docs (default: $DOCS_OUTPUT_DIR)")
    parser.add_argument("--test-mode", dest="test_mode", action="store_true", help="Only generate the test topic set")
    parser.add_argument("--full", dest="test_mode", action="store_false", help="Generate every configured topic")
    parser.add_argument("--include", action="append", metavar="IDENTITY", help="Topic identity to generate in test mode (repeatable)")
    parser.set_defaults(test_mode=None)
    args = parser.parse_args(argv)

    settings = RunSettings.from_env().with_overrides(
        config_path=args.config,
        output_dir=args.output,
        test_mode=args.test_mode,
        include=args.include,
    )

    try:
        run_once(settings)
    except DocGenError:
        # already logged by run_once
        sys.exit(1)


if __name__ == "__main__":
    main()
