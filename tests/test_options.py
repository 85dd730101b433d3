from imagick_convert.core import CommandOption
from imagick_convert.processing import CommandOptions, command_string, format_value


def test_format_value():
    assert format_value(None) is None
    assert format_value(1.0) == "1"
    assert format_value(0.05) == "0.05"
    assert format_value(12) == "12"
    assert format_value(True) == "true"
    assert format_value("85%") == "85%"


def test_flags_have_no_value_token():
    options = CommandOptions().add_option("flip").add_option("resize", "10x10")
    assert options.to_args() == ["-flip", "-resize", "10x10"]
    assert str(options) == "-flip -resize 10x10 "
    assert options.get_option("flip") == CommandOption("flip", None)
    assert options.get_option("flip").is_flag


def test_overwrite_keeps_position():
    options = CommandOptions()
    options.add_option("a", 1).add_option("b", 2).add_option("a", 3)
    assert options.keys() == ["a", "b"]
    assert [o.value for o in options] == ["3", "2"]


def test_filters_accumulate_without_dedup():
    options = CommandOptions().add_option("draw", "x")
    options.add_filter("draw", "xc:none").add_filter("draw", "xc:none")
    assert options.get_filters("draw") == ["xc:none", "xc:none"]
    assert options.to_args() == ["xc:none", "xc:none", "-draw", "x"]


def test_filter_without_option_is_not_emitted():
    options = CommandOptions().add_filter("draw", "xc:none")
    assert options.to_args() == []
    assert "draw" not in options


def test_get_filters_returns_copy():
    options = CommandOptions().add_filter("draw", "xc:none")
    options.get_filters("draw").append("oops")
    assert options.get_filters("draw") == ["xc:none"]


def test_clear():
    options = CommandOptions().add_option("a").add_filter("a", "f")
    options.clear()
    assert len(options) == 0
    assert options.get_filters("a") == []


def test_command_string_quotes_unsafe_tokens():
    assert command_string(["convert", "my file.png", "-draw", "roundRectangle 0,0 1,1 2,2"]) == (
        "convert 'my file.png' -draw 'roundRectangle 0,0 1,1 2,2' "
    )
    assert command_string([]) == ""
