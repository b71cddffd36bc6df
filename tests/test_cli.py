"""CLI tests using click's CliRunner."""

import json

from click.testing import CliRunner

from ptedl.cli.main import cli


def test_version():
    result = CliRunner().invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "ptedl" in result.output


def test_parse_prints_tracks(film_mix_path):
    result = CliRunner().invoke(cli, ["parse", str(film_mix_path)])
    assert result.exit_code == 0, result.output
    assert "Dialog" in result.output
    assert "Music" in result.output


def test_parse_with_events(film_mix_path):
    result = CliRunner().invoke(cli, ["parse", str(film_mix_path), "--events"])
    assert result.exit_code == 0, result.output
    assert "Music_01" in result.output


def test_parse_writes_json(film_mix_path, tmp_path):
    out = tmp_path / "session.json"
    result = CliRunner().invoke(cli, ["parse", str(film_mix_path), "--json", str(out)])
    assert result.exit_code == 0, result.output

    data = json.loads(out.read_text())
    assert data["name"] == "Film Mix"
    assert data["frame_rate"] == "29.97 Drop Frame"
    assert data["start_timecode"]["drop_frame"] is True
    assert [t["name"] for t in data["tracks"]] == ["Dialog", "Music"]


def test_parse_reports_errors(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_text("SESSION NAME:\tBroken\nSAMPLE RATE:\t12345\n")
    result = CliRunner().invoke(cli, ["parse", str(path)])
    assert result.exit_code == 1
    assert "broken.txt:2" in result.output
    assert "unrecognized sample rate" in result.output


def test_parse_strict_from_config(tmp_path, minimal_lines):
    edl = tmp_path / "session.txt"
    edl.write_text("\n".join([*minimal_lines[:8], "stray", *minimal_lines[8:]]) + "\n")
    config = tmp_path / "ptedl.yaml"
    config.write_text("strict: true\n")

    lenient = CliRunner().invoke(cli, ["parse", str(edl)])
    assert lenient.exit_code == 0, lenient.output

    strict = CliRunner().invoke(cli, ["parse", str(edl), "--config", str(config)])
    assert strict.exit_code == 1


def test_timecode_drop_frame():
    result = CliRunner().invoke(cli, ["timecode", "01:00:00:00", "--rate", "29.97 Drop Frame"])
    assert result.exit_code == 0, result.output
    assert "01:00:00;00" in result.output
    assert str(3600 * 30 * 100) in result.output


def test_timecode_rejects_garbage():
    result = CliRunner().invoke(cli, ["timecode", "1:2:3"])
    assert result.exit_code == 1
