"""Typed, read-only representation of the manifest rule documents.

Rule documents are plain JSON. Each object in them becomes a `SchemaNode`
once, at load time.
"""

from .utils import compile_pattern


class SchemaNode(object):
    """One node of a rule document.

    `additional_properties` is either another `SchemaNode` (applied to
    every key not named in `properties`), `False` (unexplained keys are
    rejected) or `True`/`None` (unexplained keys are ignored).

    """

    __slots__ = ("type", "required", "properties", "pattern_properties",
                 "additional_properties", "min_properties", "max_properties",
                 "min_length", "max_length", "pattern", "pattern_regex",
                 "one_of", "any_of", "items")

    def __init__(self, type=None, required=(), properties=None,
                 pattern_properties=None, additional_properties=None,
                 min_properties=None, max_properties=None, min_length=None,
                 max_length=None, pattern=None, one_of=None, any_of=None,
                 items=None):
        _set = super(SchemaNode, self).__setattr__
        _set("type", type)
        _set("required", tuple(required))
        _set("properties", dict(properties or {}))
        # Patterns are compiled once; the walker reuses them for every key.
        _set("pattern_properties",
             tuple((compile_pattern(p), node) for p, node in
                   (pattern_properties or {}).items()))
        _set("additional_properties", additional_properties)
        _set("min_properties", min_properties)
        _set("max_properties", max_properties)
        _set("min_length", min_length)
        _set("max_length", max_length)
        _set("pattern", pattern)
        _set("pattern_regex",
             compile_pattern(pattern) if pattern is not None else None)
        _set("one_of", tuple(one_of) if one_of is not None else None)
        _set("any_of", tuple(any_of) if any_of is not None else None)
        _set("items", items)

    def __setattr__(self, name, value):
        raise AttributeError("SchemaNode objects are read-only")

    def __repr__(self):
        return "<SchemaNode type=%r>" % self.type

    def with_required(self, extra):
        """Return a copy of this node requiring `extra` keys as well."""
        required = self.required + tuple(k for k in extra
                                         if k not in self.required)
        return self.copy(required=required)

    def copy(self, **overrides):
        values = dict(
            type=self.type,
            required=self.required,
            properties=self.properties,
            pattern_properties=dict((p.pattern, node) for p, node in
                                    self.pattern_properties),
            additional_properties=self.additional_properties,
            min_properties=self.min_properties,
            max_properties=self.max_properties,
            min_length=self.min_length,
            max_length=self.max_length,
            pattern=self.pattern,
            one_of=self.one_of,
            any_of=self.any_of,
            items=self.items)
        values.update(overrides)
        return SchemaNode(**values)

    @classmethod
    def from_json(cls, data):
        """Build a node (and all of its children) from a parsed document."""

        if not isinstance(data, dict):
            raise TypeError("Schema nodes must be objects, got %r" % data)

        additional = data.get("additionalProperties")
        if isinstance(additional, dict):
            additional = cls.from_json(additional)

        items = data.get("items")
        # Only the object form of `items` is supported. The array (tuple
        # validation) form is dropped.
        items = cls.from_json(items) if isinstance(items, dict) else None

        return cls(
            type=data.get("type"),
            required=data.get("required", ()),
            properties=dict((k, cls.from_json(v)) for k, v in
                            data.get("properties", {}).items()),
            pattern_properties=dict((k, cls.from_json(v)) for k, v in
                                    data.get("patternProperties", {}).items()),
            additional_properties=additional,
            min_properties=data.get("minProperties"),
            max_properties=data.get("maxProperties"),
            min_length=data.get("minLength"),
            max_length=data.get("maxLength"),
            pattern=data.get("pattern"),
            one_of=data.get("oneOf"),
            any_of=data.get("anyOf"),
            items=items)
