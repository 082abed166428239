import logging

import simplejson as json

from . import unicodehelper
from .ruleset import default_rules
from .specs.webapps import WebappSpec


log = logging.getLogger(__name__)


def detect_webapp(err, path, rules=None):
    """Detect, parse, and validate a webapp manifest stored on disk."""

    # Parse the file.
    with open(path, mode="rb") as f:
        return detect_webapp_string(err, f.read(), rules=rules)


def detect_webapp_string(err, data, rules=None):
    """Parse and validate a webapp based on the string version of the provided
    manifest. Already-parsed manifests are validated as they are.

    Returns the parsed manifest, or `None` if it could not be parsed.

    """

    if isinstance(data, (str, bytes)):
        try:
            webapp = json.loads(unicodehelper.decode(data), strict=True)
        except ValueError as exc:
            log.debug("Manifest could not be parsed: %s", exc)
            err.error("InvalidJSON",
                      "Manifest is not in a valid JSON format or has invalid "
                      "properties")
            return None
    elif data is None:
        log.debug("No manifest was provided")
        err.error("InvalidJSON",
                  "Manifest is not in a valid JSON format or has invalid "
                  "properties")
        return None
    else:
        webapp = data

    if rules is None:
        rules = default_rules()

    ws = WebappSpec(webapp, err, rules=rules)
    ws.validate()
    log.debug("Manifest validated with %d errors and %d warnings",
              len(err.errors), len(err.warnings))

    # If the manifest is still good, save it
    if not err.failed(fail_on_warnings=False):
        err.save_resource("manifest", webapp)

    return webapp
