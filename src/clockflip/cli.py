from __future__ import annotations

import argparse
import logging

from .config import FROM_CHOICES, debug_enabled, resolve_from_format
from .form import (
    ERR_FORMAT_12,
    ERR_FORMAT_24,
    ERR_RANGE_FORMAT_12,
    ERR_RANGE_FORMAT_24,
    ERR_RANGE_ORDER,
)
from .logger import setup_logger
from .timeparse import (
    convert_12_to_24,
    convert_24_to_12,
    format_time_input,
    get_current_time,
    is_valid_12_hour_format,
    is_valid_24_hour_format,
)
from .timerange import (
    convert_time_range_12_to_24,
    convert_time_range_24_to_12,
    format_time_range_input,
    is_valid_time_range_12,
    is_valid_time_range_24,
    is_valid_time_range_order,
    parse_time_range,
)

log = logging.getLogger("clockflip")


# -------------------------
# Input helpers
# -------------------------

def _looks_like_range(value: str, strict: bool) -> bool:
    candidate = value if strict else format_time_range_input(value, "24")
    return parse_time_range(candidate) is not None


def _normalize(value: str, fmt: str, is_range: bool, strict: bool) -> str:
    if strict:
        return value.strip()
    if is_range:
        return format_time_range_input(value, fmt)
    return format_time_input(value, fmt)


def _is_valid(value: str, fmt: str, is_range: bool) -> bool:
    if is_range:
        return is_valid_time_range_12(value) if fmt == "12" else is_valid_time_range_24(value)
    return is_valid_12_hour_format(value) if fmt == "12" else is_valid_24_hour_format(value)


def _format_error(fmt: str, is_range: bool) -> str:
    if is_range:
        return ERR_RANGE_FORMAT_12 if fmt == "12" else ERR_RANGE_FORMAT_24
    return ERR_FORMAT_12 if fmt == "12" else ERR_FORMAT_24


def _resolve_input(value: str, from_fmt: str, strict: bool) -> tuple[str, str, bool]:
    """
    Work out (normalized value, "12"/"24", is_range) for a cli argument.
    "auto" tries 24-hour first: a bare "9:30" reads as 09:30, not 9:30 AM.
    Raises SystemExit with a format hint when nothing fits.
    """
    is_range = _looks_like_range(value, strict)
    candidates = ("24", "12") if from_fmt == "auto" else (from_fmt,)

    for fmt in candidates:
        normalized = _normalize(value, fmt, is_range, strict)
        log.debug("trying %s-hour%s: %r -> %r", fmt, " range" if is_range else "", value, normalized)
        if _is_valid(normalized, fmt, is_range):
            return normalized, fmt, is_range

    if from_fmt == "auto":
        raise SystemExit(
            f"Could not read {value!r} as a 12-hour or 24-hour "
            f"{'range' if is_range else 'time'}. "
            f"{_format_error('12', is_range)} or {_format_error('24', is_range)}"
        )
    raise SystemExit(f"Could not read {value!r}. {_format_error(from_fmt, is_range)}")


def _convert(value: str, fmt: str, is_range: bool) -> str | None:
    if is_range:
        return convert_time_range_12_to_24(value) if fmt == "12" else convert_time_range_24_to_12(value)
    return convert_12_to_24(value) if fmt == "12" else convert_24_to_12(value)


# -------------------------
# Commands
# -------------------------

def cmd_convert(args: argparse.Namespace) -> None:
    normalized, fmt, is_range = _resolve_input(args.value, args.from_fmt, args.strict)

    if is_range and not is_valid_time_range_order(normalized):
        raise SystemExit(f"{ERR_RANGE_ORDER}: {normalized!r}")

    converted = _convert(normalized, fmt, is_range)
    if converted is None:
        raise SystemExit(f"Invalid time format: {args.value!r}")

    log.debug("converted %r (%s-hour) -> %r", normalized, fmt, converted)
    print(converted)


def cmd_check(args: argparse.Namespace) -> None:
    normalized, fmt, is_range = _resolve_input(args.value, args.from_fmt, args.strict)

    if is_range and not is_valid_time_range_order(normalized):
        raise SystemExit(f"🚫 {ERR_RANGE_ORDER}: {normalized!r}")

    kind = "range" if is_range else "time"
    print(f"✅ {normalized} is a valid {fmt}-hour {kind}")


def cmd_now(args: argparse.Namespace) -> None:
    current = get_current_time()
    if args.format == "12":
        print(current.time12)
    elif args.format == "24":
        print(current.time24)
    else:
        print(f"- 🕒 12-hour: {current.time12}")
        print(f"- 🕒 24-hour: {current.time24}")


def cmd_config(args: argparse.Namespace) -> None:
    reasons = {
        "argument": "because you passed --from",
        "environment": "because CLOCKFLIP_FROM is set",
        "default": "built-in default",
    }
    print(f"from: {args.from_fmt}")
    print(f"↳ using {reasons[args.from_source]}")
    print(f"debug: {'on' if args.debug else 'off'}")


def main(argv=None) -> None:
    p = argparse.ArgumentParser(prog="clockflip", description="12-hour / 24-hour time converter")
    p.add_argument("--debug", action="store_true", help="Verbose logging to stderr (or set CLOCKFLIP_DEBUG=1)")
    p.add_argument("--from", dest="from_arg", choices=FROM_CHOICES, default=None,
                   help="Input format: auto, 12 or 24 (default: CLOCKFLIP_FROM or auto)")

    sub = p.add_subparsers(dest="cmd", required=True)

    conv = sub.add_parser("convert", help="Convert a time or a range to the other format")
    conv.add_argument("value", help="e.g. '2:30 PM', '14:30', '9:00 AM to 5:00 PM', '09:00-17:00'")
    conv.add_argument("--strict", action="store_true", help="No lenient cleanup of the input")
    conv.add_argument("--from", dest="sub_from", choices=FROM_CHOICES, default=None,
                      help="Input format: auto, 12 or 24")
    conv.set_defaults(func=cmd_convert)

    check = sub.add_parser("check", help="Validate a time or a range without converting")
    check.add_argument("value")
    check.add_argument("--strict", action="store_true", help="No lenient cleanup of the input")
    check.add_argument("--from", dest="sub_from", choices=FROM_CHOICES, default=None,
                       help="Input format: auto, 12 or 24")
    check.set_defaults(func=cmd_check)

    now = sub.add_parser("now", help="Show the current time in both formats")
    now.add_argument("--format", choices=["both", "12", "24"], default="both")
    now.set_defaults(func=cmd_now)

    sub.add_parser("config", help="Show effective settings and where they came from").set_defaults(func=cmd_config)

    args = p.parse_args(argv)
    args.debug = debug_enabled(args.debug)
    args.from_fmt, args.from_source = resolve_from_format(getattr(args, "sub_from", None) or args.from_arg)

    setup_logger("clockflip", args.debug)
    log.debug("command=%s from=%s (%s)", args.cmd, args.from_fmt, args.from_source)

    args.func(args)


if __name__ == "__main__":
    main()
