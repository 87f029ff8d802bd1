#!/usr/bin/env python3
"""
hebo-eval CLI

Command-line interface for evaluating agents against transcript test cases.

Usage:
    # Evaluate an OpenAI model against ./examples
    hebo-eval run gpt-4o

    # Evaluate a Hebo agent with a custom config and directory
    hebo-eval run hebo-my-agent -c hebo-eval.yaml -d tests/transcripts

    # Markdown report, stricter threshold, stop at the first bad transcript
    hebo-eval run gpt-4o -f markdown -t 0.9 -s

    # Print the version
    hebo-eval version
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from hebo_eval import __version__
from hebo_eval.application.dtos import RunEvaluationRequest, RunEvaluationResponse, VALID_OUTPUT_FORMATS
from hebo_eval.application.use_cases import RunEvaluationUseCase
from hebo_eval.config import load_config
from hebo_eval.domain.exceptions import ConfigurationError
from hebo_eval.infrastructure.factories import EvaluationFactory
from hebo_eval.infrastructure.reporting import ReportGenerator
from hebo_eval.logging_utils import StructuredLogger, configure_logging
from hebo_eval.models import ComponentType


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hebo-eval",
        description="Evaluate AI agents against expected conversation transcripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("version", help="Print the hebo-eval version")

    run = subparsers.add_parser("run", help="Run evaluation test cases against an agent")
    run.add_argument(
        "agent",
        help="The agent to evaluate (e.g., gpt-4o, hebo-<agent>, claude-*)"
    )
    run.add_argument(
        "-c", "--config",
        help="Path to a YAML configuration file merged over the defaults"
    )
    run.add_argument(
        "-d", "--directory",
        help="Directory of .txt test cases (default: execution.test_cases_dir from config)"
    )
    run.add_argument(
        "-t", "--threshold",
        type=float,
        help="Pass threshold between 0 and 1 (default: scoring.threshold from config, 0.8)"
    )
    run.add_argument(
        "-f", "--format",
        choices=list(VALID_OUTPUT_FORMATS),
        help="Output format (default: execution.output_format from config, text)"
    )
    run.add_argument(
        "-s", "--stop-on-error",
        action="store_true",
        help="Stop loading test cases at the first file that fails to parse"
    )
    run.add_argument(
        "-m", "--max-concurrency",
        type=int,
        help="Maximum number of test cases run at once (default: execution.max_concurrency from config, 5)"
    )
    run.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    return parser


async def _run(use_case: RunEvaluationUseCase, request: RunEvaluationRequest) -> RunEvaluationResponse:
    try:
        return await use_case.execute(request)
    finally:
        await use_case.close()


def run_command(args: argparse.Namespace) -> int:
    configure_logging(args.verbose)
    logger = StructuredLogger(ComponentType.CLI)

    try:
        config = load_config(args.config)
        use_case = EvaluationFactory.create_use_case(args.agent, config)
        output_format = args.format or config.execution.output_format
        request = RunEvaluationRequest(
            directory=args.directory or config.execution.test_cases_dir,
            threshold=args.threshold if args.threshold is not None else config.scoring.threshold,
            max_concurrency=(
                args.max_concurrency if args.max_concurrency is not None
                else config.execution.max_concurrency
            ),
            output_format=output_format,
            stop_on_error=args.stop_on_error,
        )
    except (ConfigurationError, ValueError) as e:
        logger.error("Invalid run configuration", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logger.info("Starting evaluation", agent=args.agent, directory=request.directory)
    response = asyncio.run(_run(use_case, request))

    print(ReportGenerator(output_format).generate(response))
    return 0 if response.succeeded else 1


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "version":
        print(__version__)
        return 0

    return run_command(args)


if __name__ == "__main__":
    sys.exit(main())
