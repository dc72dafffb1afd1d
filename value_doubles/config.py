import pathlib

import yaml
from pydantic import BaseModel, ConfigDict

from value_doubles.doubles import DEFAULT_TEST_STRING

DEFAULT_MUTATED_STRING = "This is the mutated string"


class ScenarioConfig(BaseModel):
    """
    The payloads used when running a scenario.

    Can be loaded from a YAML file such as:

        initial_string: Original Test Double
        mutated_string: This is the mutated string
    """

    model_config = ConfigDict(extra="forbid")

    initial_string: str = DEFAULT_TEST_STRING
    mutated_string: str = DEFAULT_MUTATED_STRING

    @classmethod
    def from_yaml(cls, path: str | pathlib.Path) -> 'ScenarioConfig':
        text = pathlib.Path(path).read_text(encoding="utf-8")
        data = yaml.safe_load(text)
        # An empty file means "all defaults". Anything else that is not a mapping fails validation.
        if data is None:
            data = {}
        return cls.model_validate(data)
