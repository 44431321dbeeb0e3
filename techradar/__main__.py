import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from techradar import (
    LayoutOptions,
    check_layout,
    layout_radar,
    parse_program,
    print_program,
    translate,
    validate,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Lay out a technology radar")
    parser.add_argument("path", help="Path to the radar script")
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (default: INFO)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Starting seed of the placement jitter (default: 42)",
    )
    parser.add_argument(
        "--shared-random",
        action="store_true",
        help="Use one advancing random source for all blips instead of one per blip",
    )
    parser.add_argument(
        "--print-layout",
        action="store_true",
        help="Force print layout (inactive items coloured, rings labelled)",
    )
    parser.add_argument(
        "--json-output-path",
        help="Write the computed layout as JSON to the given path",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    with open(args.path, encoding="utf-8") as fin:
        text = fin.read()

    logger.info("Parsing radar script from %s", args.path)
    program = parse_program(text)
    validate(program)
    logger.info("Validation succeeded")
    logger.info("Radar script:\n%s", print_program(program))

    model = translate(program)
    if args.print_layout:
        model.config.print_layout = True

    options = LayoutOptions(shared_random=args.shared_random, seed=args.seed)
    layout = layout_radar(model.items, model.config, options)
    warnings = check_layout(layout)
    if warnings:
        logger.warning("Layout produced %d warning(s)", len(warnings))

    print(f"Radar: {layout.title.text}")
    print("Blips:")
    for blip in layout.blips:
        print(
            f"  {blip.index:>3} {blip.name} ({blip.quadrant.value}/{blip.assessment.value}): "
            f"({blip.point.x:.2f}, {blip.point.y:.2f}) {blip.color} {blip.marker}"
        )
    print("Legend:")
    for section in layout.legend:
        if not section.count:
            continue
        print(
            f"  {section.quadrant.value}/{section.assessment.value}: {section.count} item(s), "
            f"title at ({section.title.position.x:.0f}, {section.title.position.y:.0f})"
        )
    print("Warnings:")
    if warnings:
        for warning in warnings:
            print(f"  - {warning}")
    else:
        print("  (none)")

    if args.json_output_path:
        output_path = Path(args.json_output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        logger.info("Writing layout JSON to %s", output_path)
        output_path.write_text(json.dumps(layout.as_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
        print(f"Layout written to {output_path}")


if __name__ == "__main__":
    main(sys.argv[1:])
