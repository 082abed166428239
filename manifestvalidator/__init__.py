from .ruleset import RuleSet, default_rules
from .validate import format_result, validate_app, validate_manifest
