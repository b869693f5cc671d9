#!/usr/bin/env python3
"""
Parse and validate the runner action inputs.

**Conceptual**: This is the first step of the action. It reads the INPUT_*
variables exported by the GitHub runner, parses sizes and integers, checks
the mode-dependent required inputs and prints a redacted summary to the
workflow log. Any configuration problem aborts the step before a VM is
touched.

**Usage**:
    # Inside a workflow step (inputs come from the runner environment)
    python actions/parse_action_inputs.py

    # Locally, with inputs in a .env file
    #   INPUT_MODE=start
    #   INPUT_GITHUB-TOKEN=...
    #   GITHUB_REPOSITORY=octo-org/infra
    python actions/parse_action_inputs.py --env-file .env

**Outputs** (mode=start only):
    label: freshly generated runner label, written to GITHUB_OUTPUT.

**Exit codes**:
    0 - configuration is valid
    2 - missing, malformed or inconsistent inputs
"""

import argparse
import json
import sys
from pathlib import Path
from typing import List, Mapping, Optional

from dotenv import load_dotenv

# Add project root to Python path so we can import yc_runner modules
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from yc_runner.config.errors import ActionInputError
from yc_runner.config.settings import MODE_START, Config, generate_unique_label
from yc_runner.utils import workflow


def run(env: Optional[Mapping[str, str]] = None) -> Config:
    """
    Load, validate and report the configuration.

    Args:
        env: Environment mapping (defaults to os.environ).

    Returns:
        The validated Config.

    Raises:
        ActionInputError: If the inputs are missing, malformed or inconsistent.
    """
    with workflow.group("Parsing Action Inputs"):
        config = Config.from_env(env)

    workflow.add_mask(config.input.github_token)

    print(f"Repository: {config.github_context.full_name}")
    print(f"Mode: {config.input.mode}")
    print(json.dumps(config.input.summary(), indent=2, sort_keys=True))

    if config.input.mode == MODE_START:
        label = generate_unique_label()
        print(f"Generated runner label: {label}")
        workflow.set_output("label", label)

    return config


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse and validate the runner action inputs.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Load variables from this .env file first (existing variables win).",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)

    if args.env_file is not None:
        if not args.env_file.exists():
            print(f"ERROR: env file not found: {args.env_file}")
            sys.exit(2)
        load_dotenv(dotenv_path=args.env_file, override=False)

    try:
        run()
    except ActionInputError as e:
        workflow.error(str(e))
        sys.exit(2)


if __name__ == "__main__":
    main()
