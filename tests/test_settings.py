import tempfile

from imagick_convert.services import Settings


def test_defaults_without_file(tmp_path):
    s = Settings(tmp_path / "settings.ini")
    assert s.get_program() == "convert"
    assert s.get_temp_dir() == tempfile.gettempdir()
    assert s.get_http_timeout() == 30.0
    assert not (tmp_path / "settings.ini").exists()


def test_values_persist(tmp_path):
    path = tmp_path / "conf" / "settings.ini"
    s = Settings(path)
    s.set_program("magick")
    s.set_temp_dir(str(tmp_path))
    s.set_http_timeout(5)

    reloaded = Settings(path)
    assert reloaded.get_program() == "magick"
    assert reloaded.get_temp_dir() == str(tmp_path)
    assert reloaded.get_http_timeout() == 5.0


def test_invalid_timeout_falls_back(tmp_path):
    path = tmp_path / "settings.ini"
    path.write_text("[convert]\nhttp_timeout = soon\n")
    assert Settings(path).get_http_timeout() == 30.0


def test_env_overrides(tmp_path, monkeypatch):
    s = Settings(tmp_path / "settings.ini")
    s.set_program("magick")
    monkeypatch.setenv("IMAGICK_CONVERT_PROGRAM", "/usr/local/bin/convert")
    monkeypatch.setenv("IMAGICK_CONVERT_TEMP_DIR", "/scratch")
    assert s.get_program() == "/usr/local/bin/convert"
    assert s.get_temp_dir() == "/scratch"
