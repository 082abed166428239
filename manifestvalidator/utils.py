import re
from urllib.parse import urlparse


NUMERIC_SEGMENT = re.compile(r"^\d+$")


def clean(word):
    return str(word).strip()


def compile_pattern(pattern):
    """Compile a rule document pattern.

    Patterns are written for JavaScript, where `$` only matches at the very
    end of the string. Python's `$` also matches before a trailing newline,
    so every unescaped `$` outside a character class becomes `\\Z`.

    """
    output = []
    escaped = in_class = False
    for char in pattern:
        if escaped:
            escaped = False
        elif char == "\\":
            escaped = True
        elif in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
        elif char == "$":
            output.append(r"\Z")
            continue
        output.append(char)
    return re.compile("".join(output))


def is_present(value):
    """Whether a manifest field counts as provided.

    Empty strings, `null`, `false` and zero are treated as missing. Empty
    arrays and objects are *present*: `"installs_allowed_from": []` is a
    mistake worth reporting, not an absent field.

    """
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value != 0
    return True


def camel_case(word):
    """Turn `snake_case` (or any stringable value) into `SnakeCase`."""
    return "".join(clean(w[:1].upper() + w[1:]) for w in
                   str(word).split("_"))


def _segments(parents, rest):
    return [p for p in list(parents) + list(rest) if p != ""]


def glue_key(prefix, parents, *rest):
    """Build a diagnostic key out of a prefix and the path to a value.

    Every path segment is CamelCased and appended to `prefix`. Numeric
    segments (array indexes) all become `Item`.

    """
    parts = []
    for item in _segments(parents, rest):
        if NUMERIC_SEGMENT.match(str(item)):
            parts.append("Item")
        else:
            parts.append(camel_case(item))
    return prefix + "".join(parts)


def glue_object_path(prefix, parents, *rest):
    """Like `glue_key`, but joins the raw segments with dots."""
    return prefix + ".".join(str(p) for p in _segments(parents, rest))


def path_valid(path, can_be_asterisk=False, can_be_absolute=False,
               can_be_relative=False, can_be_data=False,
               can_have_protocol=False):
    """Test whether a URL is a valid URL."""

    if not isinstance(path, str):
        return False

    if path == "*":
        return can_be_asterisk
    if path.startswith("data:"):
        return can_be_data

    # Nothing good comes from relative protocols.
    if path.startswith("//"):
        return False

    # Try to parse the URL.
    try:
        parsed_url = urlparse(path)

        # If the URL is relative, return whether the URL can be relative.
        if not parsed_url.scheme or not parsed_url.netloc:
            return (can_be_absolute if parsed_url.path.startswith("/") else
                    can_be_relative)

        # If the URL is absolute but uses an invalid protocol, return False.
        if parsed_url.scheme.lower() not in ("http", "https", ):
            return False

        # Return whether absolute URLs are allowed.
        return can_have_protocol

    except ValueError:
        # If there was an error parsing the URL, return False.
        return False
