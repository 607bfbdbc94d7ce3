import pytest
from pydantic import ValidationError

from guac.angle import AngleMeasure
from guac.config import CONFIG_ENV, Config, config_path, load_config
from guac.errors import BadConfig
from guac.radix import Radix


def test_defaults():
    config = Config()
    assert config.angle_measure is AngleMeasure.RADIAN
    assert config.radix == Radix.DECIMAL
    assert config.precision == 10


@pytest.mark.parametrize("value", ["hex", "g", 16, "16", Radix.HEX])
def test_radix_forms(value):
    assert Config(radix=value).radix == Radix.HEX


def test_angle_measure_by_symbol():
    assert Config(angle_measure="deg").angle_measure is AngleMeasure.DEGREE


@pytest.mark.parametrize(
    "fields",
    [
        {"radix": 99},
        {"radix": "zzz"},
        {"angle_measure": "furlong"},
        {"precision": -1},
        {"colour": "green"},
    ],
)
def test_invalid_fields(fields):
    with pytest.raises(ValidationError):
        Config(**fields)


def test_config_is_frozen():
    config = Config()
    with pytest.raises(ValidationError):
        config.precision = 3


def test_missing_file_gives_defaults(tmp_path):
    assert load_config(tmp_path / "absent.toml") == Config()


def test_load_from_file(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text('angle_measure = "deg"\nradix = "hex"\nprecision = 4\n', encoding="utf-8")
    config = load_config(path)
    assert config.angle_measure is AngleMeasure.DEGREE
    assert config.radix == Radix.HEX
    assert config.precision == 4


def test_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "env.toml"
    path.write_text("radix = 2\n", encoding="utf-8")
    monkeypatch.setenv(CONFIG_ENV, str(path))
    assert config_path() == path
    assert load_config().radix == Radix.BINARY


def test_explicit_path_beats_environment(tmp_path, monkeypatch):
    monkeypatch.setenv(CONFIG_ENV, str(tmp_path / "ignored.toml"))
    assert config_path(tmp_path / "chosen.toml") == tmp_path / "chosen.toml"


def test_malformed_toml(tmp_path):
    path = tmp_path / "broken.toml"
    path.write_text("radix = = 3\n", encoding="utf-8")
    with pytest.raises(BadConfig):
        load_config(path)


def test_invalid_values_in_file(tmp_path):
    path = tmp_path / "bad.toml"
    path.write_text('radix = 1\nangle_measure = "furlong"\n', encoding="utf-8")
    with pytest.raises(BadConfig) as excinfo:
        load_config(path)
    assert "2 invalid field(s)" in str(excinfo.value)
