import pytest
import typer
from typer.testing import CliRunner

from imagick_convert.main import app, parse_operation

runner = CliRunner()


def test_parse_operation():
    assert parse_operation("resize:200,100") == ("resize", {"width": 200, "height": 100})
    assert parse_operation("gaussian-blur:2,0.5") == ("gaussian_blur", {"radius": 2, "sigma": 0.5})
    assert parse_operation("mirror:vertical") == ("mirror", {"mode": "vertical"})
    assert parse_operation("sepia") == ("sepia", {})


def test_parse_operation_rejects_unknown_and_extra_args():
    with pytest.raises(typer.BadParameter):
        parse_operation("explode")
    with pytest.raises(typer.BadParameter):
        parse_operation("trim:1,2")


def test_dry_run_prints_command(settings, probe, fake_run, fixture_image, tmp_path):
    dest = tmp_path / "out.png"
    result = runner.invoke(
        app,
        [
            str(fixture_image), str(dest),
            "--op", "resize:50,50", "--op", "grayscale",
            "--dry-run", "--settings", str(settings.settings_file),
        ],
    )
    assert result.exit_code == 0, result.output
    assert f"convert {fixture_image} -resize 50x50 -grayscale Rec709Luminance {dest}" in result.output
    assert fake_run.calls == []
    assert not dest.exists()


def test_convert_runs_and_saves(settings, probe, fake_run, fixture_image, tmp_path):
    dest = tmp_path / "out.png"
    result = runner.invoke(
        app,
        [str(fixture_image), str(dest), "--op", "mirror:horizontal", "--settings", str(settings.settings_file)],
    )
    assert result.exit_code == 0, result.output
    assert fake_run.calls == [["convert", str(fixture_image), "-flop", str(dest)]]
    assert dest.exists()


def test_check_reports_tool_failure(settings, probe, fake_run, fixture_image, tmp_path):
    fake_run.returncode = 1
    fake_run.stderr = "convert: unable to open image"
    result = runner.invoke(
        app,
        [str(fixture_image), str(tmp_path / "out.png"), "--check", "--settings", str(settings.settings_file)],
    )
    assert result.exit_code == 1


def test_missing_source_exits_non_zero(settings, tmp_path):
    result = runner.invoke(
        app,
        [str(tmp_path / "missing.png"), str(tmp_path / "out.png"), "--settings", str(settings.settings_file)],
    )
    assert result.exit_code == 1


def test_dry_run_does_not_render_masks(settings, probe, fake_run, fixture_image, tmp_path):
    dest = tmp_path / "out.png"
    result = runner.invoke(
        app,
        [
            str(fixture_image), str(dest),
            "--op", "round-corners:10,10",
            "--dry-run", "--settings", str(settings.settings_file),
        ],
    )
    assert result.exit_code == 0, result.output
    assert "-compose DstIn -composite" in result.output
    assert fake_run.calls == []
