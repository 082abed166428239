import re

from .schema import SchemaNode
from .utils import glue_key, glue_object_path, is_present


# Strings that look numeric ("600") pass as numbers.
NUMERIC_LOOKING = re.compile(r"[0-9.]+")


def is_valid_type(value, expected):
    """Test a parsed JSON value against a schema `type` name."""

    if expected == "array":
        return isinstance(value, (list, tuple))
    elif expected == "object":
        return isinstance(value, dict)
    elif expected == "number":
        if isinstance(value, bool):
            return False
        if isinstance(value, (int, float)):
            value = str(value)
        return (isinstance(value, str) and
                NUMERIC_LOOKING.fullmatch(value) is not None)
    elif expected == "string":
        return isinstance(value, str)
    elif expected == "boolean":
        return isinstance(value, bool)
    return False


class Spec(object):
    """Walks a parsed JSON document along a tree of `SchemaNode`s and files
    every violation it finds with the error bundle.

    Diagnostic keys are built with `glue_key` from the kind of failure and
    the path of the value that failed.

    """

    def __init__(self, data, err, rules=None):
        self.data = data
        self.err = err
        self.rules = rules

    def validate_schema(self, subject, schema, name="", parents=()):
        parents = list(parents)

        if not self._has_valid_type(subject, schema, name, parents):
            # There's no point in looking inside a value of the wrong type.
            return

        if isinstance(subject, str):
            self._has_valid_string_item(subject, schema, name, parents)
            self._has_required_string_length(subject, schema, name, parents)
            self._has_valid_string_pattern(subject, schema, name, parents)

        elif isinstance(subject, (list, tuple)):
            if schema.items is not None:
                self._has_valid_item_types(subject, schema, name, parents)

        elif isinstance(subject, dict):
            self._has_mandatory_keys(subject, schema, name, parents)
            self._has_required_property_count(subject, schema, name, parents)
            self._has_valid_properties(subject, schema, name, parents)

    def _has_valid_type(self, subject, schema, name, parents):
        if schema.type and not is_valid_type(subject, schema.type):
            self.err.error(
                glue_key("InvalidPropertyType", parents, name),
                "`%s` must be of type `%s`" % (name, schema.type))
            return False
        return True

    def _has_valid_string_item(self, subject, schema, name, parents):
        if schema.one_of is not None:
            if subject not in schema.one_of:
                self.err.error(
                    glue_key("InvalidStringType", parents, name),
                    "`%s` must be one of the following: %s" %
                        (name, ",".join(map(str, schema.one_of))))
        elif schema.any_of is not None:
            if any(v.strip() not in schema.any_of for v in
                   subject.split(",")):
                self.err.error(
                    glue_key("InvalidStringType", parents, name),
                    "`%s` must be any of the following: %s" %
                        (name, ",".join(map(str, schema.any_of))))

    def _has_required_string_length(self, subject, schema, name, parents):
        length = len(subject)
        key = glue_key("InvalidPropertyLength", parents, name)

        if schema.min_length and length < schema.min_length:
            self.err.error(key, "`%s` must be at least %d in length" %
                                    (name, schema.min_length))

        if schema.max_length and length > schema.max_length:
            self.err.error(key, "`%s` must not exceed length %d" %
                                    (name, schema.max_length))

    def _has_valid_string_pattern(self, subject, schema, name, parents):
        if schema.pattern and not schema.pattern_regex.search(subject):
            self.err.error(
                glue_key("InvalidStringPattern", parents, name),
                "`%s` must match the pattern /%s/" % (name, schema.pattern))

    def _has_valid_item_types(self, subject, schema, name, parents):
        item_schema = schema.items
        item_type = item_schema.type

        for index, item in enumerate(subject):
            if item_type and not is_valid_type(item, item_type):
                self.err.error(
                    glue_key("InvalidItemType", parents, name),
                    "items of array `%s` must be of type `%s`" %
                        (name, item_type))

            if isinstance(item, dict):
                self.validate_schema(item, item_schema, index,
                                     parents + [name])

    def _has_mandatory_keys(self, subject, schema, name, parents):
        for key in schema.required:
            if not is_present(subject.get(key)):
                self.err.error(
                    glue_key("MandatoryField", parents, name, key),
                    "Mandatory field %s is missing" % key)

    def _has_required_property_count(self, subject, schema, name, parents):
        count = len(subject)
        key = glue_key("InvalidPropertyCount", parents, name)

        if (schema.min_properties is not None and
                count < schema.min_properties):
            self.err.error(key, "`%s` must have at least %d properties." %
                                    (name, schema.min_properties))

        if (schema.max_properties is not None and
                count > schema.max_properties):
            self.err.error(key, "`%s` must have no more than %d properties." %
                                    (name, schema.max_properties))

    def _has_valid_properties(self, subject, schema, name, parents):
        child_parents = parents + [name]

        # Keys get crossed off as a property or pattern property claims them.
        unexpected = list(subject)

        for key, child_schema in schema.properties.items():
            if key in subject:
                self._explain(unexpected, key)
                self.validate_schema(subject[key], child_schema, key,
                                     child_parents)

        for key in subject:
            for regex, child_schema in schema.pattern_properties:
                if regex.search(key):
                    self._explain(unexpected, key)
                    self.validate_schema(subject[key], child_schema, key,
                                         child_parents)

        additional = schema.additional_properties
        if isinstance(additional, SchemaNode):
            for key in subject:
                if key not in schema.properties:
                    self.validate_schema(subject[key], additional, key,
                                         child_parents)
        elif additional is False:
            for key in unexpected:
                self.err.error(
                    glue_key("UnexpectedProperty", parents, name),
                    "Unexpected property `%s` found in `%s`" %
                        (key, glue_object_path("", parents, name)))

    @staticmethod
    def _explain(unexpected, key):
        if key in unexpected:
            unexpected.remove(key)
