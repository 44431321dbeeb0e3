import json

import techradar.__main__ as cli

SCRIPT = '''
radar "CLI Radar"
item "Kotlin" [quadrant=second assessment=adopt]
item "Java" [quadrant=second assessment=adopt]
item "Rust" [quadrant=second assessment=trial move=up]
'''


def test_main_writes_layout_json(tmp_path, capsys):
    script_path = tmp_path / "team.radar"
    script_path.write_text(SCRIPT, encoding="utf-8")
    json_path = tmp_path / "out" / "layout.json"

    cli.main([str(script_path), "--json-output-path", str(json_path)])

    payload = json.loads(json_path.read_text(encoding="utf-8"))
    assert payload["title"]["text"] == "CLI Radar"
    assert [blip["name"] for blip in payload["blips"]] == ["Java", "Kotlin", "Rust"]

    out = capsys.readouterr().out
    assert "Blips:" in out
    assert "overlap" in out
    assert f"Layout written to {json_path}" in out


def test_main_passes_options_to_layout(tmp_path, monkeypatch, capsys):
    script_path = tmp_path / "team.radar"
    script_path.write_text(SCRIPT, encoding="utf-8")
    seen = []
    real_layout = cli.layout_radar

    def _layout(items, config, options):
        seen.append((config.print_layout, options.shared_random, options.seed))
        return real_layout(items, config, options)

    monkeypatch.setattr(cli, "layout_radar", _layout)

    cli.main([str(script_path), "--shared-random", "--seed", "7", "--print-layout"])

    assert seen == [(True, True, 7)]
    assert "Warnings:" in capsys.readouterr().out


def test_demo_run_prints_script_blips_and_warnings(capsys):
    from techradar import demo

    demo.run()

    out = capsys.readouterr().out
    assert out.startswith("Radar script:\n")
    assert 'radar "Demo Radar"' in out
    assert "  1 Kotlin: (" in out
    assert "Warnings:\n  (none)" in out
