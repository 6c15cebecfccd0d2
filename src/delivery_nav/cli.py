# delivery_nav/cli.py
import argparse
import sys

from pydantic import ValidationError

from delivery_nav.app.build import build
from delivery_nav.config.models import OptimizerIdentityModel, ScenarioModel
from delivery_nav.domain.entities.delivery import DeliveryResult
from delivery_nav.io.map_loader import MapFormatError

EXIT_CODES = {
    DeliveryResult.SUCCESS: 0,
    DeliveryResult.BAD_COORD: 2,
    DeliveryResult.NO_ROUTE: 3,
}


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        prog="delivery-nav", description="Plan and narrate a delivery route."
    )
    p.add_argument("scenario", help="scenario JSON file")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    p.add_argument("--no-optimize", action="store_true", help="keep the given delivery order")
    p.add_argument("--quiet", action="store_true", help="no structured logs")
    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    try:
        with open(args.scenario, encoding="utf-8") as f:
            model = ScenarioModel.model_validate_json(f.read())
    except (OSError, ValidationError) as exc:
        print(f"delivery-nav: cannot read scenario: {exc}", file=sys.stderr)
        return 1

    updates = {}
    if args.log_level:
        updates["log"] = model.log.model_copy(update={"level": args.log_level})
    if args.no_optimize:
        updates["optimizer"] = OptimizerIdentityModel()
    if updates:
        model = model.model_copy(update=updates)

    try:
        app = build(model, use_logging=not args.quiet)
    except (OSError, MapFormatError) as exc:
        print(f"delivery-nav: map failed to load: {exc}", file=sys.stderr)
        return 1

    plan = app.run()
    if not plan.ok:
        print(f"delivery-nav: {plan.status.value}", file=sys.stderr)
    return EXIT_CODES[plan.status]


if __name__ == "__main__":
    sys.exit(main())
