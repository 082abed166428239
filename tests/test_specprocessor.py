import pytest

from helper import TestCase
from manifestvalidator.schema import SchemaNode
from manifestvalidator.specprocessor import Spec, is_valid_type


@pytest.mark.parametrize("value,expected,result", [
    ([], "array", True),
    ((), "array", True),
    ({}, "array", False),
    ({}, "object", True),
    ([], "object", False),
    (None, "object", False),
    (12, "number", True),
    (1.5, "number", True),
    ("600", "number", True),
    ("6.5", "number", True),
    ("-1", "number", False),
    ("6 px", "number", False),
    ("600\n", "number", False),
    (True, "number", False),
    ("foo", "string", True),
    (1, "string", False),
    (False, "boolean", True),
    (0, "boolean", False),
    ("foo", "integer", False),
])
def test_is_valid_type(value, expected, result):
    assert is_valid_type(value, expected) is result


class WalkerTestCase(TestCase):

    def walk(self, subject, schema, name="", parents=()):
        self.setup_err()
        if isinstance(schema, dict):
            schema = SchemaNode.from_json(schema)
        Spec(subject, self.err).validate_schema(subject, schema, name,
                                                parents)
        return self.err.errors


class TestTypes(WalkerTestCase):

    def test_root_type(self):
        errors = self.walk([], {"type": "object"})
        assert errors == {"InvalidPropertyType": "`` must be of type `object`"}

    def test_wrong_type_halts(self):
        """Nothing inside a wrongly typed value is inspected."""
        errors = self.walk({"a": 1}, {"type": "array",
                                      "required": ["b"],
                                      "additionalProperties": False})
        assert list(errors) == ["InvalidPropertyType"]

    def test_no_type(self):
        assert not self.walk(123, {})


class TestStrings(WalkerTestCase):

    def test_one_of(self):
        schema = {"type": "string", "oneOf": ["window", "inline"]}
        assert not self.walk("inline", schema, "disposition")
        errors = self.walk("tab", schema, "disposition")
        assert errors == {"InvalidStringTypeDisposition":
                          "`disposition` must be one of the following: "
                          "window,inline"}

    def test_one_of_exact(self):
        schema = {"oneOf": ["window"]}
        assert self.walk(" window", schema, "disposition")

    def test_any_of(self):
        schema = {"anyOf": ["portrait", "landscape"]}
        assert not self.walk("portrait", schema, "orientation")
        assert not self.walk("portrait , landscape", schema, "orientation")

        errors = self.walk("portrait,up,down", schema, "orientation")
        assert errors == {"InvalidStringTypeOrientation":
                          "`orientation` must be any of the following: "
                          "portrait,landscape"}

    def test_one_of_wins_over_any_of(self):
        schema = {"oneOf": ["a,b"], "anyOf": ["a"]}
        assert not self.walk("a,b", schema, "x")

    def test_min_length(self):
        schema = {"minLength": 3}
        assert not self.walk("abc", schema, "name")
        assert self.walk("ab", schema, "name") == {
            "InvalidPropertyLengthName": "`name` must be at least 3 in length"}

    def test_max_length(self):
        schema = {"maxLength": 3}
        assert not self.walk("abc", schema, "name")
        assert self.walk("abcd", schema, "name") == {
            "InvalidPropertyLengthName": "`name` must not exceed length 3"}

    def test_pattern_not_anchored(self):
        assert not self.walk("v1.0", {"pattern": "[0-9]"}, "version")
        assert not self.walk("v1.0", {"pattern": "^v"}, "version")

        errors = self.walk("v1.0", {"pattern": "^[0-9]"}, "version")
        assert errors == {"InvalidStringPatternVersion":
                          "`version` must match the pattern /^[0-9]/"}

    def test_pattern_end_anchor(self):
        """`$` only matches at the very end of the value."""
        schema = {"pattern": "^[0-9.]+$"}
        assert not self.walk("1.0", schema, "version")
        assert list(self.walk("1.0\n", schema, "version")) == [
            "InvalidStringPatternVersion"]

    def test_pattern_literal_dollar(self):
        assert not self.walk("a$", {"pattern": r"\$$"}, "x")
        assert self.walk("a$\n", {"pattern": r"\$$"}, "x")
        assert not self.walk("$a", {"pattern": "^[$]"}, "x")

    def test_string_checks_skip_other_types(self):
        assert not self.walk(12, {"minLength": 5, "pattern": "^a$",
                                  "oneOf": ["a"]}, "x")


class TestArrays(WalkerTestCase):

    def test_item_types(self):
        schema = {"type": "array", "items": {"type": "string"}}
        assert not self.walk(["a", "b"], schema, "precompile")

        errors = self.walk(["a", 1, None], schema, "precompile")
        assert errors == {"InvalidItemTypePrecompile":
                          "items of array `precompile` must be of type "
                          "`string`"}

    def test_items_recurse_into_objects(self):
        schema = {
            "type": "array",
            "items": {"type": "object", "required": ["to"]},
        }
        errors = self.walk([{"to": "a"}, {"from": "b"}, "c"], schema,
                           "redirects", [""])
        assert set(errors) == set(["MandatoryFieldRedirectsItemTo",
                                   "InvalidItemTypeRedirects"])

    def test_items_without_type(self):
        schema = {"type": "array", "items": {"required": ["a"]}}
        errors = self.walk([1, "b", {}], schema, "things")
        assert list(errors) == ["MandatoryFieldThingsItemA"]

    def test_array_form_items_ignored(self):
        schema = {"type": "array", "items": [{"type": "string"}]}
        assert not self.walk([1, 2], schema, "things")


class TestObjects(WalkerTestCase):

    def test_required(self):
        schema = {"type": "object", "required": ["name", "description"]}
        errors = self.walk({"name": "foo"}, schema)
        assert errors == {"MandatoryFieldDescription":
                          "Mandatory field description is missing"}

    @pytest.mark.parametrize("value", [None, "", False, 0])
    def test_required_falsy(self, value):
        errors = self.walk({"name": value}, {"required": ["name"]})
        assert list(errors) == ["MandatoryFieldName"]

    @pytest.mark.parametrize("value", [[], {}, "0", True])
    def test_required_present(self, value):
        assert not self.walk({"name": value}, {"required": ["name"]})

    def test_nested_required(self):
        schema = {"properties": {"developer": {"required": ["name"]}}}
        errors = self.walk({"developer": {}}, schema)
        assert list(errors) == ["MandatoryFieldDeveloperName"]

    def test_property_count(self):
        schema = {"minProperties": 1, "maxProperties": 2}
        assert not self.walk({"a": 1}, schema, "screen_size")

        errors = self.walk({}, schema, "screen_size")
        assert errors == {"InvalidPropertyCountScreenSize":
                          "`screen_size` must have at least 1 properties."}

        errors = self.walk({"a": 1, "b": 2, "c": 3}, schema, "screen_size")
        assert errors == {"InvalidPropertyCountScreenSize":
                          "`screen_size` must have no more than 2 "
                          "properties."}

    def test_properties_recurse(self):
        schema = {"properties": {"name": {"type": "string"}}}
        errors = self.walk({"name": 5, "other": 5}, schema)
        assert list(errors) == ["InvalidPropertyTypeName"]

    def test_pattern_properties(self):
        schema = {
            "additionalProperties": False,
            "patternProperties": {"^[0-9]+$": {"type": "string"}},
        }
        assert not self.walk({"16": "/a.png"}, schema, "icons")

        errors = self.walk({"16": 16}, schema, "icons")
        assert list(errors) == ["InvalidPropertyTypeIconsItem"]

        errors = self.walk({"big": "/a.png"}, schema, "icons")
        assert list(errors) == ["UnexpectedPropertyIcons"]

    def test_additional_schema(self):
        schema = {
            "properties": {"known": {"type": "boolean"}},
            "additionalProperties": {"type": "string"},
        }
        assert not self.walk({"known": True, "a": "b"}, schema, "x")

        errors = self.walk({"known": True, "a": 1}, schema, "x")
        assert errors == {"InvalidPropertyTypeXA": "`a` must be of type "
                                                   "`string`"}

    def test_additional_schema_includes_pattern_keys(self):
        schema = {
            "patternProperties": {"^a": {"minLength": 1}},
            "additionalProperties": {"type": "string"},
        }
        errors = self.walk({"ab": 1}, schema, "x")
        assert list(errors) == ["InvalidPropertyTypeXAb"]

    def test_additional_true(self):
        schema = {"properties": {}, "additionalProperties": True}
        assert not self.walk({"a": 1}, schema)

    def test_additional_false(self):
        schema = {
            "properties": {"name": {}},
            "additionalProperties": False,
        }
        assert not self.walk({"name": "foo"}, schema)

        errors = self.walk({"name": "foo", "widget": {}}, schema)
        assert errors == {"UnexpectedProperty":
                          "Unexpected property `widget` found in ``"}

    def test_unexpected_keys_share_a_slot(self):
        """Sibling failures of one kind at one path collapse, last wins."""
        schema = {"additionalProperties": False}
        errors = self.walk({"a": 1, "b": 2}, schema, "chrome", [""])
        assert errors == {"UnexpectedPropertyChrome":
                          "Unexpected property `b` found in `chrome`"}

    def test_deep_path(self):
        schema = {
            "properties": {
                "locales": {
                    "additionalProperties": {
                        "properties": {
                            "developer": {
                                "properties": {"url": {"type": "string"}},
                            },
                        },
                    },
                },
            },
        }
        errors = self.walk({"locales": {"es": {"developer": {"url": 1}}}},
                           schema)
        assert list(errors) == ["InvalidPropertyTypeLocalesEsDeveloperUrl"]


class TestSchemaNode(object):

    def test_read_only(self):
        node = SchemaNode.from_json({"type": "string"})
        with pytest.raises(AttributeError):
            node.type = "number"

    def test_with_required(self):
        node = SchemaNode.from_json({"required": ["name"]})
        extended = node.with_required(["developer", "name"])
        assert extended.required == ("name", "developer")
        assert node.required == ("name", )

    def test_not_an_object(self):
        with pytest.raises(TypeError):
            SchemaNode.from_json(["type", "string"])


def test_walker_uses_given_rules():
    """The walker only sees the rule set it is handed."""
    assert Spec({}, None).rules is None
    rules = object()
    assert Spec({}, None, rules=rules).rules is rules
