from . import check_layout, layout_radar, parse_program, print_program, translate, validate

DEMO = """
radar "Demo Radar" [width=1450 height=1000 print=false]
quadrant second "Languages"
quadrant first "Frameworks"
item "Kotlin" [quadrant=second assessment=adopt]
item "Rust" [quadrant=second assessment=trial move=up]
item "Perl" [quadrant=second assessment=hold active=false move=down]
item "Spring Boot" [quadrant=first assessment=adopt]
item "Kubernetes" [quadrant=third assessment=trial]
item "Cassandra" [quadrant=fourth assessment=assess]
"""


def run():
    prog = parse_program(DEMO)
    validate(prog)
    print(f"Radar script:\n{print_program(prog)}")

    model = translate(prog)
    layout = layout_radar(model.items, model.config)
    for blip in layout.blips:
        print(f"  {blip.index} {blip.name}: ({blip.point.x:.1f}, {blip.point.y:.1f})")

    warnings = check_layout(layout)
    print("Warnings:")
    if warnings:
        for warning in warnings:
            print(f"  - {warning}")
    else:
        print("  (none)")


if __name__ == "__main__":
    run()
