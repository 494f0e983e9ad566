"""
Command-line entry point for querying photographer availability.

Runs against the demo roster in ``photo_availability.demo``.

Usage:
    python main.py slots --photographer ph-ben --date 2025-03-18 --duration 90
    python main.py fleet --date 2025-03-18 --start 13:00 --end 17:00 --category Photography
    python main.py by-date --date 2025-03-18 --service portrait-session
"""

import argparse
import asyncio
import logging
import sys
from datetime import date, datetime
from typing import Optional

from photo_availability.demo import demo_bookings, demo_photographers
from photo_availability.errors import AvailabilityError
from photo_availability.logging_context import new_request_id
from photo_availability.scheduling.service import AvailabilityService
from photo_availability.schemas.availability_schema import AvailabilityRequest, TimeWindow
from photo_availability.tools.bookings import InMemoryBookingStore
from photo_availability.tools.photographers import InMemoryPhotographerDirectory

logger = logging.getLogger(__name__)


def _parse_date(value: str) -> date:
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid date {value!r}, expected YYYY-MM-DD") from None


def _build_service() -> AvailabilityService:
    today = date.today()
    return AvailabilityService(
        photographers=InMemoryPhotographerDirectory(demo_photographers(today)),
        bookings=InMemoryBookingStore(demo_bookings(today)),
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Query photographer availability from the demo roster."
    )
    sub = parser.add_subparsers(dest="command", required=True)

    slots = sub.add_parser("slots", help="Slots for one photographer on a date.")
    slots.add_argument("--photographer", required=True, help="Photographer id.")
    slots.add_argument("--date", type=_parse_date, required=True, help="YYYY-MM-DD.")
    slots.add_argument("--duration", type=int, default=None, help="Session length in minutes.")
    slots.add_argument("--service", action="append", default=None, help="Service id (repeatable).")
    slots.add_argument("--ignore-lead-time", action="store_true", help="Skip the notice period.")

    fleet = sub.add_parser("fleet", help="Photographers free inside a time window.")
    fleet.add_argument("--date", type=_parse_date, required=True, help="YYYY-MM-DD.")
    fleet.add_argument("--start", default=None, help="Window start, HH:MM.")
    fleet.add_argument("--end", default=None, help="Window end, HH:MM.")
    fleet.add_argument("--duration", type=int, default=None, help="Session length in minutes.")
    fleet.add_argument("--category", action="append", default=[], help="Required specialty.")

    by_date = sub.add_parser("by-date", help="Every slot any photographer offers on a date.")
    by_date.add_argument("--date", type=_parse_date, required=True, help="YYYY-MM-DD.")
    by_date.add_argument("--duration", type=int, default=None, help="Session length in minutes.")
    by_date.add_argument("--service", action="append", default=None, help="Service id (repeatable).")

    return parser


async def _run(args: argparse.Namespace, service: AvailabilityService) -> list[str]:
    if args.command == "slots":
        slots = await service.get_available_slots(
            args.photographer,
            args.date,
            session_duration_minutes=args.duration,
            service_ids=args.service,
            ignore_lead_time=args.ignore_lead_time,
        )
        return [slot.label for slot in slots]

    if args.command == "by-date":
        slots = await service.get_slots_by_date(
            args.date, session_duration_minutes=args.duration, service_ids=args.service
        )
        return [slot.label for slot in slots]

    window: Optional[TimeWindow] = None
    if args.start or args.end:
        window = TimeWindow.parse(args.start or "", args.end or "")
    request = AvailabilityRequest(
        target_date=args.date,
        session_duration_minutes=service.resolve_duration(args.duration),
        requested_window=window,
        required_categories=set(args.category),
    )
    result = await service.get_available_photographers(request)
    lines = [
        f"{p.name} ({p.id}): {', '.join(s.label for s in result.slots[p.id])}"
        for p in result.available
    ]
    lines.extend(f"{pid}: unavailable ({reason})" for pid, reason in result.failed.items())
    return lines


def main(argv: Optional[list[str]] = None) -> None:
    args = _build_parser().parse_args(argv)
    request_id = new_request_id()
    logger.debug("Handling '%s' as %s", args.command, request_id)

    try:
        lines = asyncio.run(_run(args, _build_service()))
    except (AvailabilityError, ValueError) as exc:
        logger.error("%s", exc)
        sys.exit(1)

    if not lines:
        sys.stdout.write("No availability.\n")
        return
    sys.stdout.write("\n".join(lines) + "\n")


if __name__ == "__main__":
    main()
