"""Example pipeline: parse a radar script and print blip and legend positions."""

from pathlib import Path

from techradar import LayoutOptions, check_layout, layout_radar, parse_program, translate, validate

SCRIPT = Path(__file__).with_name("team.radar")


def main() -> None:
    program = parse_program(SCRIPT.read_text(encoding="utf-8"))
    validate(program)
    model = translate(program)

    layout = layout_radar(model.items, model.config, LayoutOptions(shared_random=True))
    print(f"{layout.title.text}: {len(layout.blips)} blips")
    for blip in layout.blips:
        print(f"  {blip.index:>2} {blip.name:<12} ({blip.point.x:7.1f}, {blip.point.y:7.1f})")

    for section in layout.legend:
        for entry in section.entries:
            print(f"  legend {entry.index:>2} at ({entry.position.x:.0f}, {entry.position.y:.0f})")

    for warning in check_layout(layout):
        print(f"warning: {warning}")


if __name__ == "__main__":
    main()
