"""
clocksync command line.

    clocksync pool.ntp.org --protocol ntp
    clocksync time.nist.gov --protocol tp --apply
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional

from clocksync.config import ClockSyncConfig, setup_logging
from clocksync.core.types import ProtocolKind, SyncMode
from clocksync.errors import ClockSyncError, ErrorCode
from clocksync.sync import get_sync_info, sync_time

logger = logging.getLogger(__name__)

EXIT_CODES = {
    ErrorCode.UNKNOWN_ERROR: 1,
    ErrorCode.FAULT: 1,
    ErrorCode.BAD_PARAMETER: 2,
    ErrorCode.NOT_FOUND: 3,
    ErrorCode.UNAVAILABLE: 4,
    ErrorCode.UNSUPPORTED: 5,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="clocksync",
        description="Get time from a time server, optionally setting the system clock",
    )
    parser.add_argument("server", nargs="?", help="Time server name or address")
    parser.add_argument(
        "--protocol", choices=[p.value for p in ProtocolKind],
        default=ProtocolKind.NETWORK_TIME_PROTOCOL.value,
        help="Time Protocol (tp) or Network Time Protocol (ntp)",
    )
    parser.add_argument("--apply", action="store_true", help="Also set the system clock")
    parser.add_argument(
        "--ntp-client", choices=["ntpdate", "ntpd"],
        help="NTP client tool (overrides config)",
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument("--log-level", help="Logging level (overrides config)")
    parser.add_argument("--json", action="store_true", help="Print result as JSON")
    parser.add_argument("--info", action="store_true", help="Show configured commands and exit")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ClockSyncConfig.load(args.config) if args.config else ClockSyncConfig()
    except (OSError, ValueError, TypeError) as e:
        print(f"config: cannot load {args.config}: {e}", file=sys.stderr)
        return EXIT_CODES[ErrorCode.BAD_PARAMETER]
    if args.ntp_client:
        config.ntp.client = args.ntp_client
    if args.log_level:
        config.log.level = args.log_level

    errors = config.validate()
    if errors:
        for error in errors:
            print(f"config: {error}", file=sys.stderr)
        return EXIT_CODES[ErrorCode.BAD_PARAMETER]

    setup_logging(config.log)

    if args.info:
        print(json.dumps(get_sync_info(config), indent=2))
        return 0

    if not args.server:
        parser.error("server is required")

    mode = SyncMode.OBSERVE_AND_APPLY if args.apply else SyncMode.OBSERVE_ONLY
    try:
        clock_time = sync_time(args.server, ProtocolKind(args.protocol), mode, config)
    except ClockSyncError as e:
        if args.json:
            print(json.dumps({"ok": False, "error": e.to_dict()}))
        else:
            print(f"error: {e}", file=sys.stderr)
        return EXIT_CODES.get(e.code, EXIT_CODES[ErrorCode.UNKNOWN_ERROR])

    if args.json:
        result = {"ok": True, "mode": mode.value}
        if mode is SyncMode.OBSERVE_ONLY:
            result["time"] = clock_time.to_dict()
        print(json.dumps(result))
    elif mode is SyncMode.OBSERVE_ONLY:
        print(clock_time)
    else:
        print("clock updated")
    return 0


if __name__ == "__main__":
    sys.exit(main())
