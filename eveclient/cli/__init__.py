import asyncio
import functools
import json
import logging
import sys

import aiohttp
import click
import click_log

from .. import __version__
from .. import exceptions

cli_logger = logging.getLogger(__name__)
click_log.basic_config("eveclient")


class AppContext:
    def __init__(self):
        self.config = None


pass_context = click.make_pass_decorator(AppContext, ensure=True)


def catch_errors(f):
    @functools.wraps(f)
    def inner(*a, **kw):
        try:
            f(*a, **kw)
        except BaseException:
            from .utils import handle_cli_error

            handle_cli_error()
            sys.exit(1)

    return inner


@click.group()
@click_log.simple_verbosity_option("eveclient")
@click.version_option(version=__version__)
@click.option("--config", "-c", metavar="FILE", help="Config file to use.")
@pass_context
@catch_errors
def app(ctx, config):
    """
    Read and write etag-guarded REST resources
    """
    if not ctx.config:
        from .config import load_config

        ctx.config = load_config(config)


def _run(ctx, resource_name, operation):
    """Build the resource called ``resource_name`` and run ``operation`` on
    it, returning its result."""
    from .utils import resource_from_config

    async def inner():
        async with aiohttp.TCPConnector(limit_per_host=16) as conn:
            resource = resource_from_config(ctx.config, resource_name, connector=conn)
            return await operation(resource)

    return asyncio.run(inner())


def _writable(resource):
    if resource.read_only:
        raise exceptions.ReadOnlyError(f"Resource {resource.name} is read-only.")
    return resource


etag_option = click.option(
    "--etag", default=None, help="The etag of the version you want to change."
)
force_option = click.option(
    "--force/--no-force",
    default=False,
    help=(
        "Overwrite the record even if it was changed since the given etag. "
        "Without --etag, the current etag is fetched first."
    ),
)


@app.command()
@click.argument("resource")
@click.argument("id")
@pass_context
@catch_errors
def get(ctx, resource, id):
    """
    Print a single record.
    """
    from .utils import echo_json

    item = _run(ctx, resource, lambda r: r.get(id))
    if item is None:
        raise exceptions.NotFoundError(f"{resource}/{id}")
    echo_json(item)


@app.command("list")
@click.argument("resource")
@click.option("--where", default=None, help="Filter as a JSON object.")
@pass_context
@catch_errors
def list_(ctx, resource, where):
    """
    Print all records of a resource, optionally filtered.

    \b
    \b\bExamples:
    # All widgets
    eveclient list widgets

    \b
    # Only the blue ones
    eveclient list widgets --where '{"color": "blue"}'
    """
    from .utils import echo_json
    from .utils import parse_json_arg

    filter = None
    if where is not None:
        filter = {"where": parse_json_arg(where, "--where")}

    items = _run(ctx, resource, lambda r: r.list(filter))
    echo_json(items)


@app.command()
@click.argument("resource")
@click.argument("content")
@pass_context
@catch_errors
def create(ctx, resource, content):
    """
    Create a record from a JSON object.
    """
    from .utils import echo_json
    from .utils import parse_json_arg

    content = parse_json_arg(content, "the content")
    response = _run(ctx, resource, lambda r: _writable(r).create(content))
    echo_json(response.body)


def _update_command(method):
    @click.argument("resource")
    @click.argument("id")
    @click.argument("content")
    @etag_option
    @force_option
    @pass_context
    @catch_errors
    def command(ctx, resource, id, content, etag, force):
        from .utils import echo_json
        from .utils import parse_json_arg

        content = parse_json_arg(content, "the content")
        response = _run(
            ctx,
            resource,
            lambda r: getattr(_writable(r), method)(
                id, content, overwrite_if_changed=force, etag=etag
            ),
        )
        echo_json(response.body)

    return command


app.command(
    "patch", help="Change some fields of a record. Needs --etag or --force."
)(_update_command("patch"))
app.command("put", help="Replace a record. Needs --etag or --force.")(
    _update_command("put")
)


@app.command()
@click.argument("resource")
@click.argument("id")
@etag_option
@force_option
@pass_context
@catch_errors
def delete(ctx, resource, id, etag, force):
    """
    Delete a record. Needs --etag or --force.
    """
    _run(
        ctx,
        resource,
        lambda r: _writable(r).delete(id, overwrite_if_changed=force, etag=etag),
    )
    cli_logger.info(f"Deleted {resource}/{id}.")


@app.command()
@pass_context
@catch_errors
def showconfig(ctx: AppContext):
    """Show the current configuration.

    This is mostly intended to be used by scripts or other integrations.
    """
    general = dict(ctx.config.general)
    if "password" in general:
        general["password"] = "********"
    config = {"general": general, "resources": ctx.config.resources}
    click.echo(json.dumps(config, indent=2))
