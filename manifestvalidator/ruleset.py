import functools
import os
from types import MappingProxyType

import simplejson as json

from . import constants
from .schema import SchemaNode
from .utils import compile_pattern


RULES_DIR = os.path.join(os.path.dirname(__file__), "rules")

PERMISSION_SCHEMA = {
    "type": "object",
    "required": ["description"],
    "additionalProperties": False,
    "properties": {
        "description": {"type": "string"},
        "access": {"type": "string"},
    },
}

ACTIVITY_FILTER_OBJECT_SCHEMA = {
    "type": "object",
    "additionalProperties": False,
    "properties": {
        "required": {"type": "boolean"},
        "min": {"type": "number"},
        "max": {"type": "number"},
        "pattern": {"type": "string"},
        "regexp": {"type": "string"},  # FXOS 1.0/1.1
        "patternFlags": {
            "type": "string",
            "maxLength": 4,
            "pattern": "^[igmy]+$",
        },
        # `value` may be a string or an array, so it is checked by hand.
        "value": {},
    },
}

# ...but if `value` is an array, it may only hold strings.
ACTIVITY_FILTER_OBJECT_VALUE_SCHEMA = {
    "type": "array",
    "items": {"type": "string"},
}


def load_rule_document(name):
    with open(os.path.join(RULES_DIR, name), "rb") as f:
        return json.loads(f.read().decode("utf-8"))


class RuleSet(object):
    """Everything the validator needs to know about the manifest dialect.

    A rule set is built once and then shared; nothing in the validator
    modifies it.

    """

    def __init__(self, common, marketplace, market_urls=None):
        self.schema = SchemaNode.from_json(common)
        self.marketplace_required = tuple(marketplace.get("required", ()))
        self.listed_schema = self.schema.with_required(
            self.marketplace_required)

        self.version_pattern = common["properties"]["version"]["pattern"]
        self.origin_pattern = common["properties"]["origin"]["pattern"]
        self.version_regex = compile_pattern(self.version_pattern)
        self.origin_regex = compile_pattern(self.origin_pattern)

        self.market_urls = tuple(market_urls if market_urls is not None else
                                 constants.DEFAULT_WEBAPP_MRKT_URLS)
        self.banned_origins = constants.BANNED_ORIGINS
        self.max_ideal_name_length = constants.MAX_IDEAL_NAME_LENGTH
        self.orientations = constants.ORIENTATIONS

        self.permissions = MappingProxyType(dict(constants.PERMISSIONS))
        self.permissions_access = MappingProxyType(
            dict(constants.PERMISSIONS_ACCESS))

        base = SchemaNode.from_json(PERMISSION_SCHEMA)
        self._permission_schemas = {}
        for name, modes in self.permissions_access.items():
            access = base.properties["access"].copy(one_of=modes)
            properties = dict(base.properties, access=access)
            self._permission_schemas[name] = base.copy(
                required=("description", "access"), properties=properties)
        self._default_permission_schema = base

        self.filter_schema = SchemaNode.from_json(
            ACTIVITY_FILTER_OBJECT_SCHEMA)
        self.filter_value_schema = SchemaNode.from_json(
            ACTIVITY_FILTER_OBJECT_VALUE_SCHEMA)

    @classmethod
    def load(cls, market_urls=None):
        return cls(load_rule_document("common.json"),
                   load_rule_document("marketplace.json"),
                   market_urls=market_urls)

    def root_schema(self, listed=False):
        return self.listed_schema if listed else self.schema

    def permission_schema(self, name):
        """The schema a single permission entry has to follow."""
        return self._permission_schemas.get(name,
                                            self._default_permission_schema)


@functools.lru_cache(maxsize=None)
def default_rules():
    """Return the shared rule set built from the bundled rule documents."""
    return RuleSet.load()
