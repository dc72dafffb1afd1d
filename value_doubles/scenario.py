"""
Runs the setup/test sequence against each kind of test double:

    setup:
        init collaborator()
        init sut(collaborator)

    test:
        mutate collaborator
        call sut.someMethod()

Each run records a transcript of what the collaborator and the system under test report after each step.
"""
#  value-doubles - Value vs. Reference Semantics for Test Doubles
#  Copyright (c) 2023. Andreas Kirsch
#
#  This program is free software: you can redistribute it and/or modify
#  it under the terms of the GNU Affero General Public License as published
#  by the Free Software Foundation, either version 3 of the License, or
#  (at your option) any later version.
#
#  This program is distributed in the hope that it will be useful,
#  but WITHOUT ANY WARRANTY; without even the implied warranty of
#  MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#  GNU Affero General Public License for more details.
#
#  You should have received a copy of the GNU Affero General Public License
#  along with this program.  If not, see <https://www.gnu.org/licenses/>.

import logging
import typing

from pydantic import BaseModel

from value_doubles.config import ScenarioConfig
from value_doubles.doubles import ClassDouble, PDouble, StructDouble, TestDouble
from value_doubles.sut import SystemUnderTest

logger = logging.getLogger(__name__)

AFTER_CONSTRUCT = "after construct"
AFTER_MUTATE = "after mutate"

# Maps a realization name to a factory taking the initial payload.
REALIZATIONS: dict[str, typing.Callable[[str], PDouble]] = {
    "struct": StructDouble,
    "class": ClassDouble,
    # Always uses the zero-argument form and thus the default payload.
    "default": lambda _: TestDouble(),
}


class ScenarioStep(BaseModel):
    label: str
    collaborator: str
    reported: str


class ScenarioTranscript(BaseModel):
    realization: str
    double_type: str
    shared: bool
    mutated_string: str
    steps: list[ScenarioStep]

    @property
    def mutation_visible(self) -> bool:
        """Whether the system under test saw the mutation, i.e. it holds the caller's instance."""
        return self.shared


def run_scenario(realization: str, config: ScenarioConfig | None = None) -> ScenarioTranscript:
    if realization not in REALIZATIONS:
        raise ValueError(f"Unknown realization {realization!r}. Expected one of {sorted(REALIZATIONS)}.")
    if config is None:
        config = ScenarioConfig()

    collaborator = REALIZATIONS[realization](config.initial_string)
    sut = SystemUnderTest(collaborator)

    steps = [ScenarioStep(label=AFTER_CONSTRUCT, collaborator=collaborator.description(), reported=sut.report())]
    logger.debug("%s: %s", realization, steps[-1])

    collaborator.update_string(config.mutated_string)

    steps.append(ScenarioStep(label=AFTER_MUTATE, collaborator=collaborator.description(), reported=sut.report()))
    logger.debug("%s: %s", realization, steps[-1])

    return ScenarioTranscript(
        realization=realization,
        double_type=type(collaborator).__name__,
        shared=sut.test_double is collaborator,
        mutated_string=config.mutated_string,
        steps=steps,
    )


def run_all(config: ScenarioConfig | None = None) -> list[ScenarioTranscript]:
    return [run_scenario(realization, config) for realization in REALIZATIONS]
