import logging
import sys

import argparse
import requests

from .errorbundle import ErrorBundle
from .ruleset import RuleSet
from . import webapp


log = logging.getLogger(__name__)


def main(argv=None):
    "Main function. Handles delegation to other functions."

    parser = argparse.ArgumentParser(
        description="Validate a web app manifest.")

    parser.add_argument("manifest",
                        help="The path or URL of the manifest you're testing")
    parser.add_argument("-o",
                        "--output",
                        default="text",
                        choices=("text", "json"),
                        help="The output format that you expect",
                        required=False)
    parser.add_argument("-v",
                        "--verbose",
                        action="store_const",
                        const=True,
                        help="""If the output format supports it, makes
                        the analysis summary include extra info.""")
    parser.add_argument("--boring",
                        action="store_const",
                        const=True,
                        help="""Activating this flag will remove color
                        support from the terminal.""")
    parser.add_argument("--listed",
                        action="store_const",
                        const=True,
                        help="Indicates that the app will be listed on "
                             "the Firefox Marketplace.")
    parser.add_argument("--packaged",
                        action="store_const",
                        const=True,
                        help="Indicates that the app is distributed as a "
                             "package rather than hosted.")
    parser.add_argument("--market-url",
                        action="append",
                        dest="market_urls",
                        help="A Marketplace URL accepted in "
                             "`installs_allowed_from`. May be repeated; "
                             "replaces the default list.")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s")

    error_bundle = ErrorBundle(listed=args.listed, packaged=args.packaged)
    rules = RuleSet.load(args.market_urls) if args.market_urls else None

    try:
        if "://" in args.manifest:
            webapp.detect_webapp_string(
                error_bundle, fetch_manifest(args.manifest), rules=rules)
        else:
            webapp.detect_webapp(error_bundle, args.manifest, rules=rules)
    except (IOError, requests.exceptions.RequestException) as exc:
        log.error("Could not read the manifest: %s; Manifest: %s",
                  exc, args.manifest)
        sys.exit(2)

    # Print the output of the tests based on the requested format.
    if args.output == "text":
        sys.stdout.write(error_bundle.print_summary(
            verbose=args.verbose, no_color=args.boring))
    elif args.output == "json":
        sys.stdout.write(error_bundle.render_json())

    if error_bundle.failed(fail_on_warnings=False):
        sys.exit(1)
    else:
        sys.exit(0)


def fetch_manifest(url):
    """Download a hosted manifest."""

    response = requests.get(url)
    response.raise_for_status()
    return response.content


# Start up the testing and return the output.
if __name__ == "__main__":
    main()
