"""Command-line entry point: ``commnet-calc``.

Examples:
    commnet-calc                         # DSN Lv.3 to a command module
    commnet-calc -f DSN2 -t 2:RA-2 -t HG-5
    commnet-calc -D my_antennas.yaml -A  # list devices incl. custom ones
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path

import click

from cli.report import render_devices, render_report
from cli.specifiers import parse_specifier
from domain.devices.catalog import DeviceCatalog
from domain.devices.errors import DeviceError
from domain.devices.repositories import DeviceRepository
from domain.link.errors import LinkError
from domain.link.services import LinkRunner
from infrastructure.devices import YamlDeviceAdapter

logger = logging.getLogger(__name__)


def build_catalog(
    device_files: Iterable[Path], repository: DeviceRepository | None = None
) -> DeviceCatalog:
    """Seed built-ins, then apply each device file in the given order."""
    repository = repository or YamlDeviceAdapter()
    catalog = DeviceCatalog.with_builtins()
    for path in device_files:
        definitions = repository.load_devices(path)
        logger.info("Applying %d devices from %s", len(definitions), Path(path).name)
        catalog.load(definitions)
    return catalog


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-f",
    "--from",
    "from_tokens",
    multiple=True,
    metavar="COUNT:NAME",
    help="Device on the sending side as [COUNT:]NAME. Repeatable. "
    "Defaults to one 'DSN Lv.3'.",
)
@click.option(
    "-t",
    "--to",
    "to_tokens",
    multiple=True,
    metavar="COUNT:NAME",
    help="Device on the receiving side as [COUNT:]NAME. Repeatable. "
    "Defaults to one 'Command Module'.",
)
@click.option(
    "-D",
    "--devices",
    "device_files",
    multiple=True,
    envvar="COMMNET_DEVICES",
    type=click.Path(exists=False, dir_okay=False, path_type=Path),
    help="YAML/JSON file with extra device definitions; later files override "
    "earlier ones and built-ins. Repeatable.",
)
@click.option("-A", "--antennas", is_flag=True, help="Print known antennas and exit.")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
def main(
    from_tokens: tuple[str, ...],
    to_tokens: tuple[str, ...],
    device_files: tuple[Path, ...],
    antennas: bool,
    verbose: bool,
) -> None:
    """Compute CommNet range and signal strength between two endpoints."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        catalog = build_catalog(device_files)
        if antennas:
            click.echo(render_devices(catalog.all()))
            return
        from_specs = [parse_specifier(token) for token in from_tokens]
        to_specs = [parse_specifier(token) for token in to_tokens]
        report = LinkRunner(catalog).run(from_specs, to_specs)
    except (DeviceError, LinkError, OSError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(render_report(report))


if __name__ == "__main__":  # pragma: no cover
    main()
