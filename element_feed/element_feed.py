import json
import logging
from datetime import datetime, timezone
from pathlib import Path

import click

from .config import FeedConfig
from .errors import ElementFeedError
from .normalizer import convert_elements_data, load_dataset, load_source
from .preview import render_snapshot
from .selector import hour_identifier
from .snapshot import generate_element_of_the_day, generate_element_of_the_hour, snapshot_for_day, snapshot_for_hour
from .utils import parse_timestamp
from .validator import DatasetValidator
from .writer import AtomicJsonWriter

logger = logging.getLogger(__name__)

DAY_OUTPUT = Path("api") / "element-of-the-day.json"
HOUR_OUTPUT = Path("api") / "element-of-the-hour.json"
DATA_OUTPUT = Path("data.json")


def _parse_at(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_timestamp(value)
    except ValueError as e:
        raise click.BadParameter(f"not an ISO-8601 timestamp: {value}") from e


def _now(at):
    # The clock is only read here, every other function takes the moment explicitly
    return at if at is not None else datetime.now(timezone.utc).astimezone()


def _build_snapshot(kind, config, at, source, dataset):
    if dataset is not None:
        data = load_dataset(dataset)
        build = snapshot_for_day if kind == "day" else snapshot_for_hour
        return build(data, at, config).to_dict()
    raw = load_source(source or config.source_path)
    generate = generate_element_of_the_day if kind == "day" else generate_element_of_the_hour
    return generate(at, raw, config)


at_option = click.option("--at", default=None, callback=_parse_at, help="ISO-8601 moment to publish for (default: now)")
source_option = click.option("--source", "-s", default=None, type=click.Path(exists=True, resolve_path=True), help="Raw PubChem table")
dataset_option = click.option(
    "--dataset",
    "-d",
    default=None,
    type=click.Path(exists=True, resolve_path=True),
    help="Normalized dataset to read instead of the raw table",
)


@click.group()
@click.option("--config", "-c", default=None, type=click.Path(exists=True, resolve_path=True))
@click.option("--verbose", "-v", is_flag=True, default=False)
@click.pass_context
def element_feed(ctx, config, verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if config is not None:
        with open(config) as f:
            config = FeedConfig.from_dict(json.load(f))
    else:
        config = FeedConfig()

    ctx.obj = config


@element_feed.command()
@click.argument("source", default=None, required=False, type=click.Path(exists=True, resolve_path=True))
@click.argument("output", default=None, required=False, type=click.Path(resolve_path=True))
@at_option
@click.pass_obj
def convert(config, source, output, at):
    """Convert the PubChem table into the simplified dataset."""
    try:
        raw = load_source(source or config.source_path)
        data = convert_elements_data(raw, _now(at), config.data_source, config.description)
        AtomicJsonWriter(config.indent).write(output or config.dataset_path, data.to_dict())
    except (ElementFeedError, OSError) as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Converted {len(data.elements)} elements to {Path(output or config.dataset_path).name}")
    if data.elements:
        first, last = data.elements[0], data.elements[-1]
        click.echo(f"  First element: {first.name} ({first.symbol})")
        click.echo(f"  Last element: {last.name} ({last.symbol})")


@element_feed.command()
@at_option
@source_option
@dataset_option
@click.option("--output-dir", "-o", default=None, type=click.Path(file_okay=False, resolve_path=True))
@click.pass_obj
def day(config, at, source, dataset, output_dir):
    """Publish the element of the day."""
    at = _now(at)
    base = Path(output_dir or config.output_dir)
    writer = AtomicJsonWriter(config.indent)
    try:
        output = _build_snapshot("day", config, at, source, dataset)
        writer.write(base / DAY_OUTPUT, output)
        if config.mirror_day_to_data_json:
            writer.write(base / DATA_OUTPUT, output)
    except (ElementFeedError, OSError) as e:
        raise click.ClickException(str(e)) from e

    element = output["element"]
    click.echo(f"Element of the Day: {element['name']} ({element['symbol']})")
    click.echo(f"Updated: {element['updated_at']}")


@element_feed.command()
@at_option
@source_option
@dataset_option
@click.option("--output-dir", "-o", default=None, type=click.Path(file_okay=False, resolve_path=True))
@click.pass_obj
def hour(config, at, source, dataset, output_dir):
    """Publish the element of the hour."""
    at = _now(at)
    base = Path(output_dir or config.output_dir)
    try:
        output = _build_snapshot("hour", config, at, source, dataset)
        AtomicJsonWriter(config.indent).write(base / HOUR_OUTPUT, output)
    except (ElementFeedError, OSError) as e:
        raise click.ClickException(str(e)) from e

    element = output["element"]
    click.echo(f"Element of the Hour: {element['name']} ({element['symbol']})")
    click.echo(f"Hour ID: {hour_identifier(at)}")
    click.echo(f"Updated: {element['updated_at']}")


@element_feed.command()
@click.argument("dataset", default=None, required=False, type=click.Path(exists=True, resolve_path=True))
@click.pass_obj
def validate(config, dataset):
    """Check a normalized dataset against the element invariants."""
    try:
        data = load_dataset(dataset or config.dataset_path)
    except (ElementFeedError, OSError) as e:
        raise click.ClickException(str(e)) from e

    violations = DatasetValidator().validate(data)
    for violation in violations:
        click.echo(f"{violation.rule}: {violation.message}")

    if violations:
        raise click.ClickException(f"{len(violations)} violation(s) in {len(data.elements)} elements")
    click.echo(f"{len(data.elements)} elements OK")


@element_feed.command()
@click.argument("kind", type=click.Choice(["day", "hour"]))
@at_option
@source_option
@dataset_option
@click.pass_obj
def preview(config, kind, at, source, dataset):
    """Print the snapshot that would be published, without writing it."""
    try:
        output = _build_snapshot(kind, config, _now(at), source, dataset)
    except (ElementFeedError, OSError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(render_snapshot(output, kind), nl=False)
