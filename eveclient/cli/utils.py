import importlib
import json
import sys

import aiohttp
import click

from .. import exceptions
from ..resource import create_resource
from ..utils import get_init_args
from . import cli_logger


class _StrategyIndex:
    def __init__(self):
        self._strategies = dict(
            http="eveclient.strategy.http.HttpStrategy",
            memory="eveclient.strategy.memory.MemoryStrategy",
        )

    def __getitem__(self, name):
        item = self._strategies[name]
        if not isinstance(item, str):
            return item

        modname, clsname = item.rsplit(".", 1)
        mod = importlib.import_module(modname)
        self._strategies[name] = rv = getattr(mod, clsname)
        assert rv.strategy_name == name
        return rv


strategy_names = _StrategyIndex()
del _StrategyIndex


def handle_cli_error(e=None):
    """
    Print a useful error message for the current exception.

    This is supposed to catch all exceptions, and should never raise any
    exceptions itself.
    """

    try:
        if e is not None:
            raise e
        else:
            raise
    except exceptions.UserError as e:
        cli_logger.critical(e)
    except exceptions.WrongEtagError as e:
        cli_logger.error(
            "The record was changed by someone else since the given etag "
            "({}). Fetch it again, or pass --force to overwrite the "
            "changes.".format(e)
        )
    except exceptions.TargetMissingError as e:
        cli_logger.error(
            f"{e.resource}/{e.id} does not exist (anymore), nothing to {e.method}."
        )
    except exceptions.NotFoundError as e:
        cli_logger.error(f"Not found: {e}")
    except exceptions.ReadOnlyError as e:
        cli_logger.error(
            "{}\nSet `read_only = false` in the resource section to allow "
            "writes.".format(e)
        )
    except exceptions.InvalidResponse as e:
        cli_logger.error(
            "The server returned something eveclient doesn't understand. "
            "Error message: {!r}\n"
            "While this is most likely a serverside problem, the eveclient "
            "devs are generally interested in such bugs, please report it.".format(e)
        )
    except aiohttp.ClientResponseError as e:
        cli_logger.error(f"The server answered {e.status}: {e.message}")
    except (click.Abort, KeyboardInterrupt):
        pass
    except Exception as e:
        tb = sys.exc_info()[2]
        import traceback

        tb = traceback.format_tb(tb)
        msg = f"Unknown error occurred: {e}\nUse `-vdebug` to see the full traceback."

        cli_logger.error(msg)
        cli_logger.debug("".join(tb))


def strategy_class_from_config(config):
    config = dict(config)
    strategy_name = config.pop("type")
    try:
        cls = strategy_names[strategy_name]
    except KeyError:
        raise exceptions.UserError(f"Unknown strategy type: {strategy_name}")
    return cls, config


def strategy_instance_from_config(config, *, connector: aiohttp.BaseConnector):
    """
    :param config: A configuration dictionary to pass as kwargs to the class
        corresponding to config['type']
    """
    from eveclient.strategy.http import HttpStrategy

    cls, new_config = strategy_class_from_config(config)

    if issubclass(cls, HttpStrategy):
        assert connector is not None
        new_config["connector"] = connector

    try:
        return cls(**new_config)
    except Exception:
        return handle_strategy_init_error(cls, new_config)


def handle_strategy_init_error(cls, config):
    e = sys.exc_info()[1]
    if not isinstance(e, TypeError) or "__init__" not in repr(e):
        raise

    all, required = get_init_args(cls)
    given = set(config)
    missing = required - given
    invalid = given - all

    problems = []

    if missing:
        problems.append(
            "{} strategy requires the parameters: {}".format(
                cls.strategy_name, ", ".join(sorted(missing))
            )
        )

    if invalid:
        problems.append(
            "{} strategy doesn't take the parameters: {}".format(
                cls.strategy_name, ", ".join(sorted(invalid))
            )
        )

    if not problems:
        raise e

    raise exceptions.UserError(
        f"Failed to initialize {cls.strategy_name} strategy", problems=problems
    )


def resource_from_config(config, resource_name, *, connector):
    options = config.get_resource_options(resource_name)
    strategy = strategy_instance_from_config(
        config.get_strategy_config(), connector=connector
    )
    return create_resource(
        resource_name, strategy, read_only=options.get("read_only", False)
    )


def parse_json_arg(value, what):
    try:
        return json.loads(value)
    except ValueError as e:
        raise exceptions.UserError(f"Invalid JSON for {what}: {e}")


def echo_json(data):
    click.echo(json.dumps(data, indent=2, sort_keys=True))
