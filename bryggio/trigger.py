import argparse
import asyncio
import logging
import sys
from typing import Optional

from bryggio.client_app import ClientSettings, MeasureResult, create_logger
from bryggio.clients.measure import MeasurementTrigger
from bryggio.domain import BrewStatus, BrewViewModel


async def run_trigger(settings: ClientSettings, name: str, logger: Optional[logging.Logger] = None) -> MeasureResult:
    logger = logger or create_logger("bryggio", settings)
    view_model = BrewViewModel(BrewStatus(name=name), logger=logger)
    trigger = MeasurementTrigger(settings, logger=logger)
    try:
        return await trigger.trigger_measurement(view_model)
    finally:
        await trigger.aclose()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Ask the brewery backend to start a measurement.")
    parser.add_argument("--url", type=str, default=None, help="Base URL of the backend (overrides BRYGGIO_URL).")
    parser.add_argument("--name", type=str, default=BrewStatus().name, help="Brewing station name.")
    parser.add_argument("--quiet", action="store_true", help="Do not echo log lines to stderr.")
    args = parser.parse_args(argv)

    settings = ClientSettings(base_url=args.url) if args.url else ClientSettings()
    logger = create_logger("bryggio.cli", settings)
    console = None
    if not args.quiet:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
        logger.addHandler(console)

    try:
        result = asyncio.run(run_trigger(settings, args.name, logger=logger))
    finally:
        if console is not None:
            logger.removeHandler(console)
    print(result.model_dump_json())
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
