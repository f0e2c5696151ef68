import json
import os
import string
from configparser import RawConfigParser
from itertools import chain

from .. import exceptions
from ..utils import expand_path

GENERAL_REQUIRED = frozenset(["type"])
RESOURCE_ALL = frozenset(["read_only"])
SECTION_NAME_CHARS = frozenset(chain(string.ascii_letters, string.digits, "_"))


def validate_section_name(name, section_type):
    invalid = set(name) - SECTION_NAME_CHARS
    if invalid:
        chars_display = "".join(sorted(SECTION_NAME_CHARS))
        raise exceptions.UserError(
            'The {}-section "{}" contains invalid characters. Only '
            "the following characters are allowed for resource "
            "names:\n{}".format(section_type, name, chars_display)
        )


def _validate_general_section(general_config):
    missing = GENERAL_REQUIRED - set(general_config)
    if missing:
        raise exceptions.UserError(
            "Invalid general section. Copy the example config from the README "
            "and edit it.",
            problems=[
                "general section is missing the parameters: {}".format(
                    ", ".join(sorted(missing))
                )
            ],
        )


def _validate_resource_section(options):
    invalid = set(options) - RESOURCE_ALL
    if invalid:
        raise ValueError(
            "resource section doesn't take the parameters: {}".format(
                ", ".join(sorted(invalid))
            )
        )

    read_only = options.get("read_only", False)
    if not isinstance(read_only, bool):
        raise ValueError("`read_only` must be true or false.")


class _ConfigReader:
    def __init__(self, f):
        self._parser = c = RawConfigParser()
        c.read_file(f)
        self._seen_names = set()

        self._general = {}
        self._resources = {}

    def _parse_section(self, section_type, name, options):
        validate_section_name(name, section_type)
        if name in self._seen_names:
            raise ValueError(f'Name "{name}" already used.')
        self._seen_names.add(name)

        if section_type == "general":
            if self._general:
                raise ValueError("More than one general section.")
            self._general = options
        elif section_type == "resource":
            _validate_resource_section(options)
            self._resources[name] = options
        else:
            raise ValueError("Unknown section type.")

    def parse(self):
        for section in self._parser.sections():
            if " " in section:
                section_type, name = section.split(" ", 1)
            else:
                section_type = name = section

            try:
                self._parse_section(
                    section_type,
                    name,
                    dict(_parse_options(self._parser.items(section), section=section)),
                )
            except ValueError as e:
                raise exceptions.UserError(f'Section "{section}": {e}')

        _validate_general_section(self._general)
        return self._general, self._resources


def _parse_options(items, section=None):
    for key, value in items:
        try:
            yield key, json.loads(value)
        except ValueError as e:
            raise ValueError(f'Section "{section}", option "{key}": {e}')


class Config:
    def __init__(self, general, resources):
        self.general = general
        self.resources = resources

    @classmethod
    def from_fileobject(cls, f):
        reader = _ConfigReader(f)
        return cls(*reader.parse())

    @classmethod
    def from_filename_or_environment(cls, fname=None):
        if fname is None:
            fname = os.environ.get("EVECLIENT_CONFIG", None)
        if fname is None:
            xdg_config_dir = os.environ.get(
                "XDG_CONFIG_HOME", expand_path("~/.config/")
            )
            fname = os.path.join(xdg_config_dir, "eveclient/config")

        try:
            with open(fname) as f:
                return cls.from_fileobject(f)
        except exceptions.UserError:
            raise
        except Exception as e:
            raise exceptions.UserError(f"Error during reading config {fname}: {e}")

    def get_resource_options(self, resource_name):
        try:
            return self.resources[resource_name]
        except KeyError:
            raise exceptions.UserError(
                "Resource {!r} not found. "
                "These are the configured resources: {}".format(
                    resource_name, list(self.resources)
                )
            )

    def get_strategy_config(self):
        return dict(self.general)


def load_config(fname=None):
    return Config.from_filename_or_environment(fname)
