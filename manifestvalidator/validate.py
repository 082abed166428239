from .errorbundle import ErrorBundle
from .ruleset import RuleSet
from . import webapp


def validate_manifest(content, listed=False, packaged=False, rules=None):
    """
    Validate a manifest and return its diagnostics.

    `content`:
        The manifest, either as JSON text (or bytes) or already parsed.
    `listed`:
        Whether the app is headed for the app marketplace.
    `packaged`:
        Whether the app is distributed as a package rather than hosted.
    `rules`:
        A `RuleSet` to validate against. The bundled rules are used when
        this is `None`.

    Returns a dict with two keys, `errors` and `warnings`, each mapping a
    diagnostic key to a human readable message. Every call starts from a
    clean slate.
    """
    bundle = ErrorBundle(listed=listed, packaged=packaged)
    webapp.detect_webapp_string(bundle, content, rules=rules)
    return bundle.result()


def validate_app(data, listed=False, packaged=False, market_urls=None,
                 format="json"):
    """
    A handy function for validating apps.

    `data`:
        A copy of the manifest as a JSON string.
    `listed`:
        Whether the app is headed for the app marketplace.
    `packaged`:
        Whether the app is distributed as a package.
    `market_urls`:
        A list of URLs to use when validating the `installs_allowed_from`
        field of the manifest. Does not apply if `listed` is not set to `True`.
    `format`:
        "json" to get the rendered JSON summary back, `None` for the bundle.
    """
    bundle = ErrorBundle(listed=listed, packaged=packaged)

    rules = RuleSet.load(market_urls) if market_urls is not None else None
    webapp.detect_webapp_string(bundle, data, rules=rules)
    return format_result(bundle, format)


def format_result(bundle, format):
    formats = {"json": lambda b: b.render_json()}
    if format is not None:
        return formats[format](bundle)
    else:
        return bundle
