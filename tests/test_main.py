import json
import sys

import main


def test_headless_run_completes(tmp_path, monkeypatch, capsys):
    path = tmp_path / "balance.json"
    path.write_text(json.dumps({
        "simulation": {
            "territories": 2,
            "characters_per_territory": 8,
            "death_chance": 0.05,
            "log_interval": 12,
        }
    }), encoding="utf-8")
    monkeypatch.setattr(sys, "argv", ["main.py", "--config", str(path), "--ticks", "24", "--seed", "3", "--quiet"])

    main.main()

    out = capsys.readouterr().out
    assert "Loaded 103 skills and 33 technologies" in out
    assert "Created territory Aldermoor with 8 characters" in out
    assert "Simulation completed after 24 ticks" in out
    assert "Traceback" not in out
