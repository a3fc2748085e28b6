"""CLI main entry point."""

import asyncio
import json
import logging
from pathlib import Path

import click
from pydantic import TypeAdapter, ValidationError

from .assets import get_entries_by_asset_url
from .collection import get_collection, get_entries_by_collection
from .config import SiteConfig
from .consts import CONFIG_PATH_DEFAULT
from .errors import CmsIndexException, EntryLoadException
from .fields import get_field_by_key_path
from .log import setup as setup_log
from .models import ContentPath, Entry
from .state import AppContext

logger = logging.getLogger(__name__)

_entries_adapter = TypeAdapter(list[Entry])
_content_paths_adapter = TypeAdapter(list[ContentPath])


def load_snapshot(entries_path: str | None) -> tuple[list[Entry], list[ContentPath]]:
    """Read entries (and optionally content paths) from a JSON snapshot.

    The snapshot is either a list of entries or an object with ``entries``
    and ``content_paths`` lists.
    """
    if not entries_path:
        return [], []

    path = Path(entries_path)
    if not path.exists():
        raise EntryLoadException(f"Entries file not found: {entries_path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise EntryLoadException(f"Failed to read entries file {entries_path}: {e}") from e

    if isinstance(data, list):
        data = {"entries": data}
    if not isinstance(data, dict):
        raise EntryLoadException("Entries file must contain a list or an object")

    try:
        entries = _entries_adapter.validate_python(data.get("entries", []))
        content_paths = _content_paths_adapter.validate_python(
            data.get("content_paths", data.get("contentPaths", []))
        )
    except ValidationError as e:
        raise EntryLoadException(f"Invalid entries file {entries_path}: {e}") from e

    return entries, content_paths


def build_context(config_path: str, entries_path: str | None) -> AppContext:
    cfg = SiteConfig.load_from_file(config_path)
    ctx = AppContext(config=cfg)
    entries, content_paths = load_snapshot(entries_path)
    ctx.load(entries, content_paths)
    return ctx


def echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))


def entry_refs(entries: list[Entry]) -> list[dict]:
    return [
        {
            "id": entry.id,
            "slug": entry.slug,
            "collection_name": entry.collection_name,
            "file_name": entry.file_name,
        }
        for entry in entries
    ]


@click.group()
@click.option(
    "--config", "-c", default=CONFIG_PATH_DEFAULT, help="Configuration file path"
)
@click.option("--entries", "-e", default=None, help="JSON snapshot of loaded entries")
@click.option("--log-file", default=None, help="Log file path")
@click.pass_context
def cli(ctx, config: str, entries: str | None, log_file: str | None):
    """cmsindex - query a CMS content schema and its loaded entries."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config
    ctx.obj["entries_path"] = entries
    setup_log(log_file)


def _context(ctx) -> AppContext:
    try:
        return build_context(ctx.obj["config_path"], ctx.obj["entries_path"])
    except CmsIndexException as e:
        logger.error(f"Application error: {e}")
        raise click.ClickException(str(e))


@cli.command(name="collection")
@click.argument("name")
@click.pass_context
def collection_command(ctx, name: str):
    """Show a collection's resolved i18n configuration."""
    app = _context(ctx)
    collection = get_collection(app, name)
    i18n = collection.i18n
    echo_json(
        {
            "name": name,
            "found": collection.definition is not None,
            "i18n": {
                "structure": i18n.structure.value,
                "has_locales": i18n.has_locales,
                "locales": list(i18n.locales),
                "default_locale": i18n.default_locale,
            },
        }
    )


@cli.command(name="field")
@click.argument("collection_name")
@click.argument("key_path")
@click.option("--file", "file_name", default=None, help="File name of a file collection")
@click.option("--values", default="{}", help="Flattened content values as JSON")
@click.option("--strict", is_flag=True, help="Fail on key path segments that do not match")
@click.pass_context
def field_command(
    ctx, collection_name: str, key_path: str, file_name: str | None, values: str, strict: bool
):
    """Resolve a key path to its field definition."""
    app = _context(ctx)
    try:
        value_map = json.loads(values)
    except json.JSONDecodeError as e:
        raise click.BadParameter(f"not valid JSON: {e}", param_hint="--values")
    if not isinstance(value_map, dict):
        raise click.BadParameter("must be a JSON object", param_hint="--values")

    try:
        field = get_field_by_key_path(
            app, collection_name, file_name, key_path, value_map, strict=strict
        )
    except CmsIndexException as e:
        logger.error(f"Application error: {e}")
        raise click.ClickException(str(e))

    echo_json(field.model_dump(exclude_none=True) if field else None)


@cli.command(name="entries")
@click.argument("collection_name")
@click.pass_context
def entries_command(ctx, collection_name: str):
    """List the entries of a collection."""
    app = _context(ctx)
    echo_json(entry_refs(get_entries_by_collection(app, collection_name)))


@cli.command(name="asset-refs")
@click.argument("url")
@click.option("--timeout", type=float, default=None, help="Scan timeout in seconds")
@click.pass_context
def asset_refs_command(ctx, url: str, timeout: float | None):
    """List the entries that use an asset."""
    app = _context(ctx)
    try:
        found = asyncio.run(get_entries_by_asset_url(app, url, timeout=timeout))
    except CmsIndexException as e:
        logger.error(f"Application error: {e}")
        raise click.ClickException(str(e))
    except asyncio.TimeoutError:
        raise click.ClickException(f"Asset scan timed out after {timeout}s")

    echo_json(entry_refs(found))
