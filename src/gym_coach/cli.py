"""CLI entry point for gym-coach."""

import logging

import click

from .commands import conditions, equipment, exercises, init, phase, profile, program, session


@click.group()
@click.version_option(version="0.1.0", prog_name="gym-coach")
@click.option("--verbose", "-v", is_flag=True, help="Log engine decisions to stderr")
def main(verbose: bool):
    """gym-coach: rules-based training programs that respect your injuries.

    Builds a weekly split from your schedule and equipment, leaves out
    exercises that aggravate painful zones, adds rehab work, and
    progresses loads from what you actually did last session.

    Example usage:

        # Initialize the project
        gym-coach init

        # Tell it about yourself and your gym
        gym-coach profile setup
        gym-coach equipment add barbell bench squat_rack dumbbells

        # Generate a program and train
        gym-coach program generate
        gym-coach session run
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Register commands
main.add_command(init)
main.add_command(profile)
main.add_command(conditions)
main.add_command(equipment)
main.add_command(exercises)
main.add_command(program)
main.add_command(session)
main.add_command(phase)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
