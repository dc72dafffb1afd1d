"""Console script for value_doubles."""

import logging

import click
import pydantic
import yaml

from value_doubles.config import ScenarioConfig
from value_doubles.scenario import REALIZATIONS, ScenarioTranscript, run_scenario


def echo_transcript(transcript: ScenarioTranscript):
    semantics = "shared" if transcript.shared else "copied"
    click.echo(f"{transcript.double_type} ({transcript.realization}, {semantics}):")
    for step in transcript.steps:
        click.echo(f"  {step.label}: collaborator={step.collaborator!r} sut={step.reported!r}")
    click.echo(f"  mutation visible: {'yes' if transcript.mutation_visible else 'no'}")


@click.command()
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with initial_string and mutated_string.",
)
@click.option(
    "--realization",
    type=click.Choice([*REALIZATIONS, "all"]),
    default="all",
    show_default=True,
    help="Which test double to run the scenario with.",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(config_path, realization, verbose):
    """Main entrypoint."""
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)

    if config_path is None:
        config = ScenarioConfig()
    else:
        try:
            config = ScenarioConfig.from_yaml(config_path)
        except (UnicodeDecodeError, yaml.YAMLError, pydantic.ValidationError) as e:
            raise click.BadParameter(str(e), param_hint="--config") from e

    click.echo("value-doubles")
    click.echo("=" * len("value-doubles"))

    realizations = list(REALIZATIONS) if realization == "all" else [realization]
    for name in realizations:
        echo_transcript(run_scenario(name, config))


if __name__ == "__main__":
    main()  # pragma: no cover
