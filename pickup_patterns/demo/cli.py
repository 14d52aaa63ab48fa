"""Command-line demo: build a pickup truck and drive it through gear changes."""

import json
import logging

import click

from pickup_patterns.builder.truck_builder import TruckBuilder
from pickup_patterns.config.constants import (
    AvailablePackages,
    EngineType,
    TransmissionType,
    Trim,
)
from pickup_patterns.errors import PickupPatternError
from pickup_patterns.fleet.truck import PickupTruck

# CLI operation name -> PickupTruck method taking no arguments
SIMPLE_OPERATIONS = {
    "park": PickupTruck.park,
    "reverse": PickupTruck.reverse,
    "neutral": PickupTruck.neutral,
    "drive": PickupTruck.drive,
    "brake": PickupTruck.apply_brake,
}


def _names(enum_cls):
    return [member.name for member in enum_cls]


def truck_options(func):
    """Shared --engine/--transmission/--trim/--package options."""
    options = [
        click.option("--engine", type=click.Choice(_names(EngineType), case_sensitive=False),
                     default="V6", show_default=True, help="Engine type."),
        click.option("--transmission", type=click.Choice(_names(TransmissionType), case_sensitive=False),
                     default="MANUAL", show_default=True, help="Transmission type."),
        click.option("--trim", type=click.Choice(_names(Trim), case_sensitive=False),
                     default="EXTENDED_CAB", show_default=True, help="Trim level."),
        click.option("--package", type=click.Choice(_names(AvailablePackages), case_sensitive=False),
                     default="OFF_ROAD", show_default=True, help="Package option."),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def build_truck(engine: str, transmission: str, trim: str, package: str) -> PickupTruck:
    """Run the full builder sequence from option names."""
    return (
        TruckBuilder.light_duty_truck()
        .with_engine(EngineType[engine.upper()])
        .and_transmission(TransmissionType[transmission.upper()])
        .and_trim_option(Trim[trim.upper()])
        .and_package(AvailablePackages[package.upper()])
        .build()
    )


def apply_operation(truck: PickupTruck, operation: str):
    """Apply one CLI operation such as "reverse" or "accelerate:45"."""
    name, _, arg = operation.partition(":")
    name = name.lower()
    if name == "accelerate":
        try:
            speed = float(arg)
        except ValueError:
            raise click.BadParameter(
                f"accelerate needs a speed, e.g. accelerate:30 (got {operation!r})"
            ) from None
        return truck.accelerate(speed)
    if name not in SIMPLE_OPERATIONS or arg:
        raise click.BadParameter(
            f"unknown operation {operation!r}; expected one of "
            f"{', '.join(SIMPLE_OPERATIONS)} or accelerate:<speed>"
        )
    return SIMPLE_OPERATIONS[name](truck)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging.")
def main(verbose):
    """Pickup truck step-builder and drive-state demo."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("pickup_patterns").setLevel(logging.DEBUG if verbose else logging.INFO)


@main.command()
@truck_options
def build(engine, transmission, trim, package):
    """Build a truck and print its configuration as JSON."""
    truck = build_truck(engine, transmission, trim, package)
    config = truck.config
    click.echo(json.dumps({
        "engine": config.engine,
        "transmission": config.transmission,
        "trim": config.trim,
        "package_type": config.package_type,
        "options": config.describe(),
        "state": str(truck.state),
    }, indent=2))


@main.command()
@truck_options
@click.argument("operations", nargs=-1, required=True)
def drive(engine, transmission, trim, package, operations):
    """Build a truck, then apply OPERATIONS in order.

    OPERATIONS are park, reverse, neutral, drive, brake or accelerate:<km/h>.
    """
    truck = build_truck(engine, transmission, trim, package)
    click.echo(f"start: {truck.state}")
    for operation in operations:
        try:
            state = apply_operation(truck, operation)
        except PickupPatternError as exc:
            raise click.ClickException(f"{operation}: {exc}") from exc
        click.echo(f"{operation}: {state}")


if __name__ == "__main__":
    main()
