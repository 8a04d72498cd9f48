import argparse
import logging
import sys
from typing import Optional, Sequence, TextIO

from arithcalc.config import DEFAULT_EXIT_COMMAND, DEFAULT_LOG_LEVEL, DEFAULT_PROMPT, LOG_FORMAT, ConsoleConfig
from arithcalc.parser import CalcSyntaxError
from arithcalc.runtime import evaluate
from arithcalc.utils import format_result

logger = logging.getLogger(__name__)


def run(config: ConsoleConfig, stdin: TextIO, stdout: TextIO) -> None:
    """Read-evaluate-print loop. Stops on the exit command or end of input."""
    print(f'Type "{config.exit_command}" to exit', file=stdout)
    logger.info("Session started")
    while True:
        print(config.prompt, end="", file=stdout, flush=True)
        line = stdin.readline()
        if not line:
            logger.info("End of input, leaving")
            break
        line = line.rstrip("\r\n")
        if line == config.exit_command:
            break

        try:
            result = evaluate(line, strict=config.strict)
        except CalcSyntaxError as e:
            logger.debug("Rejected %r: %s", line, e)
            print(f"Error: {e}", file=stdout)
            continue
        except RecursionError:
            logger.warning("Rejected a line of %d characters: nested too deeply", len(line))
            print("Error: expression nested too deeply", file=stdout)
            continue

        print(f"{config.prompt}{format_result(result)}", file=stdout)
    logger.info("Session finished")


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive arithmetic expression evaluator")
    parser.add_argument(
        "--prompt",
        type=str,
        default=DEFAULT_PROMPT,
        help="Prompt printed before each line",
    )
    parser.add_argument(
        "--exit-command",
        type=str,
        default=DEFAULT_EXIT_COMMAND,
        help="Line that ends the session",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject input left over after a complete expression",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=DEFAULT_LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level, logs go to stderr",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_arg_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    config = ConsoleConfig(prompt=args.prompt, exit_command=args.exit_command, strict=args.strict)
    run(config, stdin=sys.stdin, stdout=sys.stdout)
