"""Command-line entry point: generate a gray code table and write it out.

Pipeline:
    1. Load run config (packaged gray.v1.yaml unless --config is given)
    2. Configure logging (stderr, optional file)
    3. Acquire num_bits and radix from arguments or stdin
    4. Generate the table (timed)
    5. Optionally verify the adjacency invariants
    6. Write the table to the output file (timed)
    7. Print the timing report to stdout

CLI:
    graycode 4,3
    graycode 4 3 --output codes.txt
    echo 4,3 | graycode --verify --log-level DEBUG
    python -m graycode 2,2

Errors are raised as ``GrayCodeError`` subclasses by the modules below
and turned into a diagnostic plus exit code here only (see
``graycode.errors`` for the codes).
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence, TextIO

from graycode import __version__, arguments, generator, serializer, verify
from graycode.errors import GrayCodeError
from graycode.utils import logging_config, profiler, validators

logger = logging.getLogger(__name__)

TIMING_FORMAT = (
    "It took {compute:.3f} seconds to compute the gray code "
    "and {write:.3f} seconds to write the results"
)
LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="graycode",
        description="Generate a generalized (mixed-radix) reflected gray code.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Input shapes:\n"
            "  graycode N,K          one combined argument\n"
            "  graycode N K          two arguments\n"
            "  echo N,K | graycode   first line of stdin\n"
            "N is the number of digits, K the radix."
        ),
    )
    parser.add_argument(
        "values",
        nargs="*",
        metavar="N,K",
        help="Digit count and radix, as 'N,K' or 'N K'; read from stdin if omitted",
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        help="Output file (default from config: gray.txt)",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        help="Run config file (gray.v1 YAML)",
    )
    parser.add_argument(
        "--verify",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Check adjacency invariants before writing",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (default from config)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Also log to this file",
    )
    parser.add_argument(
        "--json-logs",
        action="store_true",
        default=None,
        help="Write the log file as JSON lines",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _setup_logging(args: argparse.Namespace, log_cfg: validators.LoggingConfig) -> None:
    rotate = log_cfg.rotate.model_dump() if log_cfg.rotate is not None else None
    logging_config.setup_logging(
        log_level=args.log_level or log_cfg.level,
        log_file=args.log_file or log_cfg.file,
        json=log_cfg.json_format if args.json_logs is None else args.json_logs,
        color=log_cfg.color,
        rotate=rotate,
        context={"app": "graycode"},
    )


def run(
    values: Sequence[str],
    output: str,
    *,
    check: bool = False,
    stdin: TextIO | None = None,
) -> profiler.TimingReport:
    """Acquire parameters, generate, optionally verify, and write the table.

    Parameters
    ----------
    values : Sequence[str]
        Positional arguments (zero, one or two).
    output : str
        Output file path.
    check : bool
        Verify the table before writing, default False.
    stdin : TextIO, optional
        Input stream for the zero-argument case.

    Returns
    -------
    profiler.TimingReport
        ``compute`` and ``write`` timings in seconds.

    Raises
    ------
    GrayCodeError
        On any input, validation, verification or output failure.
    """
    params = arguments.acquire_params(values, stdin)
    logging_config.push_context(num_bits=params.num_bits, radix=params.radix)

    report = profiler.TimingReport()
    with profiler.timer("compute", sink=report.record):
        table = generator.generate_from(params)

    if check:
        verify.verify_table(table, params.radix)

    with profiler.timer("write", sink=report.record):
        serializer.write_table(table, output)

    logger.debug("Timings: %r", report)
    return report


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    """CLI entry point; returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        run_cfg = validators.load_run_config(args.config)
    except GrayCodeError as e:
        print(f"graycode: {e}", file=sys.stderr)
        return e.exit_code

    _setup_logging(args, run_cfg.logging)
    logging_config.install_excepthook()

    output = args.output or run_cfg.output.path
    check = run_cfg.output.verify if args.verify is None else args.verify

    try:
        report = run(args.values, output, check=check, stdin=stdin)
    except GrayCodeError as e:
        logger.debug("Aborting", exc_info=True)
        print(f"graycode: {e}", file=sys.stderr)
        return e.exit_code
    finally:
        logging_config.pop_context()
        logging_config.shutdown()

    print(TIMING_FORMAT.format(compute=report["compute"], write=report["write"]))
    return 0


if __name__ == "__main__":
    sys.exit(main())
