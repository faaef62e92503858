"""
pwmeter Command-Line Entry Point
================================

Usage:
  pwmeter "P@ssw0rd123!"
  pwmeter --min-length 12 --min-symbols 1 "P@ssw0rd123!"
  pwmeter --file passwords.txt --json
  pwmeter --compare "N3w-P@ss!" "OldPass1"

Exit codes:
  0  every password passed the policy
  1  at least one password was rejected by the policy
  2  usage or configuration error
"""
import argparse
import dataclasses
import getpass
import json
import logging
import math
import sys
from pathlib import Path
from typing import Iterable, List, Optional

from .constants import DEFAULT_STRENGTH_SCALE
from .core.config import Config
from .core.logging_config import LoggingConfig
from .exceptions import ComparisonError, PasswordMeterError
from .models import CrackTimeOptions, PasswordOptions
from .services.comparison_service import compare_password
from .services.crack_time_service import calculate_crack_time
from .services.score_service import compute_score, score_breakdown
from .services.strength_service import get_strength
from .version import APP_NAME, VERSION

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_REJECTED = 1
EXIT_USAGE = 2

# CLI flag dest -> PasswordOptions field
_POLICY_FLAGS = {
    "min_length": "min_length",
    "max_length": "max_length",
    "min_uppercase": "uppercase_letters_min_length",
    "min_lowercase": "lowercase_letters_min_length",
    "min_numbers": "numbers_min_length",
    "min_symbols": "symbols_min_length",
}


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog=APP_NAME,
        description="Offline password strength meter",
    )
    ap.add_argument("password", nargs="?",
                    help="password to check (prompted for when omitted)")
    ap.add_argument("--file", "-f",
                    help="file with one password per line")
    ap.add_argument("--policy",
                    help="JSON file with password options (camelCase or snake_case keys)")
    ap.add_argument("--min-length", type=int)
    ap.add_argument("--max-length", type=int)
    ap.add_argument("--min-uppercase", type=int)
    ap.add_argument("--min-lowercase", type=int)
    ap.add_argument("--min-numbers", type=int)
    ap.add_argument("--min-symbols", type=int)
    ap.add_argument("--guesses-per-second", type=float,
                    help="attacker guess rate (default 5e11)")
    ap.add_argument("--possible-characters", type=int,
                    help="assumed alphabet size (default 95)")
    ap.add_argument("--compare", metavar="NEW_PASSWORD",
                    help="compare each password against NEW_PASSWORD")
    ap.add_argument("--breakdown", action="store_true",
                    help="show every metric's contribution")
    ap.add_argument("--json", action="store_true",
                    help="print one JSON object per password")
    ap.add_argument("--log-level",
                    help="DEBUG, INFO, WARNING, ERROR (default from PWMETER_LOG_LEVEL)")
    ap.add_argument("--version", action="version", version=f"{APP_NAME} {VERSION}")
    return ap


def load_policy(args: argparse.Namespace) -> PasswordOptions:
    """--policy file first, then individual flags on top."""
    data = {}
    if args.policy:
        path = Path(args.policy)
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError as e:
            raise PasswordMeterError(f"Policy file not found: {path}", code="POLICY_NOT_FOUND") from e
        except json.JSONDecodeError as e:
            raise PasswordMeterError(f"Invalid JSON in policy file: {path}",
                                     code="POLICY_INVALID", detail=str(e)) from e
        if not isinstance(data, dict):
            raise PasswordMeterError(f"Policy file must contain a JSON object: {path}",
                                     code="POLICY_INVALID")

    options = PasswordOptions.from_dict(data)
    overrides = {
        field_name: getattr(args, flag)
        for flag, field_name in _POLICY_FLAGS.items()
        if getattr(args, flag) is not None
    }
    if overrides:
        options = dataclasses.replace(options, **overrides)
    return options


def load_crack_time_options(args: argparse.Namespace, config: Config) -> CrackTimeOptions:
    guesses = args.guesses_per_second
    if guesses is None:
        guesses = config.get_float("PWMETER_GUESSES_PER_SECOND")
    characters = args.possible_characters
    if characters is None:
        characters = config.get_int("PWMETER_POSSIBLE_CHARACTERS")
    return CrackTimeOptions(guesses_per_second=guesses, possible_characters=characters)


def iter_passwords(args: argparse.Namespace) -> Iterable[str]:
    if args.file:
        path = Path(args.file)
        try:
            with open(path, "r", encoding="utf-8") as f:
                for line in f:
                    pw = line.rstrip("\r\n")
                    if pw:
                        yield pw
        except FileNotFoundError as e:
            raise PasswordMeterError(f"Password file not found: {path}", code="FILE_NOT_FOUND") from e
    elif args.password is not None:
        yield args.password
    else:
        yield getpass.getpass("Password: ")


def analyze_one(password: str, options: PasswordOptions, crack_options: CrackTimeOptions,
                compare_to: Optional[str] = None, breakdown: bool = False) -> dict:
    result = compute_score(password, options)
    crack = calculate_crack_time(password, crack_options)
    report = {
        "length": len(password),
        "score": result.score,
        "strength": get_strength(result.score, DEFAULT_STRENGTH_SCALE),
        "errors": list(result.errors),
        "crack_time": crack.as_dict(),
    }
    if breakdown and result.is_valid:
        report["breakdown"] = score_breakdown(password)
    if compare_to is not None:
        try:
            report["comparison"] = compare_password(password, compare_to, options).as_dict()
        except ComparisonError as e:
            report["comparison"] = {"error": e.message}
    return report


def to_json(report: dict) -> str:
    """Strict JSON; an infinite crack time is written as null seconds."""
    crack = report["crack_time"]
    if math.isinf(crack["seconds"]):
        report = dict(report, crack_time=dict(crack, seconds=None))
    return json.dumps(report, allow_nan=False)


def pretty_print(report: dict, out=None) -> None:
    out = out or sys.stdout
    print("Password analysis:", file=out)
    print(f"- Length: {report['length']}", file=out)
    print(f"- Score: {report['score']} ({report['strength']})", file=out)
    print(f"- Crack time: {report['crack_time']['description']}", file=out)
    if report["errors"]:
        print("Policy violations:", file=out)
        for err in report["errors"]:
            print(f" - {err}", file=out)
    if "breakdown" in report:
        print("Breakdown:", file=out)
        for name, value in report["breakdown"].items():
            print(f"  {name:<32}{value:>6}", file=out)
    comparison = report.get("comparison")
    if comparison:
        if "error" in comparison:
            print(f"Comparison: {comparison['error']}", file=out)
        else:
            print(
                f"Comparison: {comparison['oldPasswordScore']} -> {comparison['newPasswordScore']} "
                f"({comparison['difference']:+}%, ratio {comparison['differencePercentage']})",
                file=out,
            )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = Config()

    LoggingConfig.setup_logging(
        log_level=args.log_level,
        log_file=config.get("PWMETER_LOG_FILE"),
        enable_colors=config.get_bool("PWMETER_LOG_COLORS", True),
        config=config,
    )

    exit_code = EXIT_OK
    try:
        options = load_policy(args)
        crack_options = load_crack_time_options(args, config)
        for pw in iter_passwords(args):
            report = analyze_one(pw, options, crack_options,
                                 compare_to=args.compare, breakdown=args.breakdown)
            if report["errors"]:
                exit_code = EXIT_REJECTED
            if args.json:
                print(to_json(report))
            else:
                pretty_print(report)
                print()
    except PasswordMeterError as e:
        logger.debug("Aborting on configuration error", exc_info=True)
        print(f"error: {e.message}", file=sys.stderr)
        return EXIT_USAGE

    return exit_code


if __name__ == "__main__":
    sys.exit(main())
