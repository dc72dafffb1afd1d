import pydantic
import pytest

from value_doubles.config import DEFAULT_MUTATED_STRING, ScenarioConfig
from value_doubles.doubles import DEFAULT_TEST_STRING


def test_defaults():
    config = ScenarioConfig()
    assert config.initial_string == DEFAULT_TEST_STRING
    assert config.mutated_string == DEFAULT_MUTATED_STRING


def test_from_yaml(tmp_path):
    path = tmp_path / "scenario.yaml"
    path.write_text("initial_string: foo\nmutated_string: bar\n")

    assert ScenarioConfig.from_yaml(path) == ScenarioConfig(initial_string="foo", mutated_string="bar")


def test_from_yaml_partial(tmp_path):
    path = tmp_path / "scenario.yaml"
    path.write_text("mutated_string: ''\n")

    config = ScenarioConfig.from_yaml(str(path))
    assert config.initial_string == DEFAULT_TEST_STRING
    assert config.mutated_string == ""


def test_from_yaml_empty_file(tmp_path):
    path = tmp_path / "scenario.yaml"
    path.write_text("")

    assert ScenarioConfig.from_yaml(path) == ScenarioConfig()


def test_from_yaml_unknown_key(tmp_path):
    path = tmp_path / "scenario.yaml"
    path.write_text("initial_strin: typo\n")

    with pytest.raises(pydantic.ValidationError):
        ScenarioConfig.from_yaml(path)


@pytest.mark.parametrize("text", ["0\n", "false\n", "[]\n", "''\n"])
def test_from_yaml_not_a_mapping(tmp_path, text):
    path = tmp_path / "scenario.yaml"
    path.write_text(text)

    with pytest.raises(pydantic.ValidationError):
        ScenarioConfig.from_yaml(path)


def test_from_yaml_invalid_utf8(tmp_path):
    path = tmp_path / "scenario.yaml"
    path.write_bytes(b"initial_string: \xff\xfe\n")

    with pytest.raises(UnicodeDecodeError):
        ScenarioConfig.from_yaml(path)
