"""AoC 2022 CLI - output formats and exit status.

Tests cover:
    - Text and --json answers on stdout
    - A failing day is reported and the remaining days still run
    - No inputs at all exits with status 1
"""

import json

from aoc2022.main import main

CALORIES = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n\n7000\n8000\n9000\n\n10000\n"
SNAFU = "1=-0-2\n12111\n2=0=\n21\n2=01\n111\n20012\n112\n1=-1=\n1-12\n12\n1=\n122\n"


def test_text_output_for_every_available_day(tmp_path, capsys):
    (tmp_path / "01_input.txt").write_text(CALORIES)
    (tmp_path / "25_input.txt").write_text(SNAFU)
    assert main(["--input-dir", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        "Day 01 part 1: 24000",
        "Day 01 part 2: 45000",
        "Day 25 part 1: 2=-1=0",
    ]


def test_json_output(tmp_path, capsys):
    (tmp_path / "01_input.txt").write_text(CALORIES)
    assert main(["1", "--input-dir", str(tmp_path), "--json"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["day"] == 1
    assert report["title"] == "Calorie Counting"
    assert [a["value"] for a in report["answers"]] == [24000, 45000]


def test_failing_day_does_not_stop_the_others(tmp_path, capsys):
    (tmp_path / "01_input.txt").write_text(CALORIES)
    assert main(["2", "1", "--input-dir", str(tmp_path)]) == 1
    captured = capsys.readouterr()
    assert "Day 02: No input for day 2" in captured.err
    assert "Day 01 part 1: 24000" in captured.out


def test_json_error_envelope(tmp_path, capsys):
    assert main(["26", "--input-dir", str(tmp_path), "--json"]) == 1
    envelope = json.loads(capsys.readouterr().out)["error"]
    assert envelope["code"] == "UNKNOWN_DAY"
    assert envelope["context"]["day"] == 26


def test_no_inputs(tmp_path, capsys):
    assert main(["--input-dir", str(tmp_path / "missing")]) == 1
    assert "No puzzle inputs found in" in capsys.readouterr().err


def test_input_dir_from_environment(tmp_path, monkeypatch, capsys):
    (tmp_path / "1_input.txt").write_text(CALORIES)
    monkeypatch.setenv("AOC_INPUT_DIR", str(tmp_path))
    assert main([]) == 0
    assert "Day 01 part 2: 45000" in capsys.readouterr().out
