import collections.abc

import lockdiff.constants
import lockdiff.logging
from lockdiff import errors
from lockdiff.models import group as group_models


class GroupRules:
    """
    An ordered set of custom group rules.

    Rules are tried in the order they were given, and so are the prefixes within each rule.
    A prefix may belong to only one group.
    """

    def __init__(self, rules: collections.abc.Iterable[group_models.CustomGroupRule] = ()):
        self.rules: tuple[group_models.CustomGroupRule, ...] = tuple(rules)

        prefix_owner: dict[str, str] = {}
        for rule in self.rules:
            if rule.name == "":
                raise errors.ConfigurationError("Custom group name must not be empty")
            for prefix in rule.prefixes:
                if prefix == "":
                    raise errors.ConfigurationError(
                        f'Group "{rule.name}" has an empty prefix, which would match every package'
                    )
                owner = prefix_owner.setdefault(prefix, rule.name)
                if owner != rule.name:
                    raise errors.ConfigurationError(
                        f'Prefix "{prefix}" is defined in multiple groups: "{owner}" and '
                        f'"{rule.name}"'
                    )

    @property
    def group_names(self) -> list[str]:
        return [rule.name for rule in self.rules]

    def group_order(self) -> list[str]:
        """
        The order groups appear in a report: built-in groups, then custom groups, then "other".
        """
        ordered = dict.fromkeys(
            [
                lockdiff.constants.core_group,
                lockdiff.constants.core_extensions_group,
                lockdiff.constants.extensions_group,
            ]
        )
        ordered.update(dict.fromkeys(self.group_names))
        ordered.update(dict.fromkeys([lockdiff.constants.other_group]))
        return list(ordered)

    def classify(self, package_name: str, package_type: str) -> str:
        return classify(package_name, package_type, self.rules)


def classify(
    package_name: str,
    package_type: str,
    rules: tuple[group_models.CustomGroupRule, ...] = (),
) -> str:
    """
    Assign a package to exactly one group.

    The first custom rule with a matching prefix wins. Otherwise the built-in rules decide by
    package name, then by package type.
    """
    for rule in rules:
        if rule.match(package_name):
            return rule.name

    if package_name == lockdiff.constants.core_package_name:
        return lockdiff.constants.core_group
    if package_type == lockdiff.constants.framework_package_type:
        return lockdiff.constants.core_extensions_group
    if package_type == lockdiff.constants.extension_package_type:
        return lockdiff.constants.extensions_group
    return lockdiff.constants.other_group


def parse_group_option(option: str) -> group_models.CustomGroupRule | None:
    """
    Parse a "groupName:prefix1,prefix2" command line value.

    Returns None when the value has no group name or no prefixes.
    """
    name, _, prefixes_str = option.partition(":")
    name = name.strip()
    prefixes = [prefix.strip() for prefix in prefixes_str.split(",")]
    prefixes = [prefix for prefix in prefixes if prefix != ""]
    if name == "" or len(prefixes) == 0:
        return None

    # Repeated prefixes within one group are harmless
    return group_models.CustomGroupRule(name=name, prefixes=tuple(dict.fromkeys(prefixes)))


def rules_from_options(options: collections.abc.Iterable[str]) -> GroupRules:
    """
    Build group rules from command line values. A group given twice keeps its first position and
    takes the prefixes of its last occurrence.
    """
    by_name: dict[str, group_models.CustomGroupRule] = {}
    for option in options:
        rule = parse_group_option(option)
        if rule is None:
            lockdiff.logging.warning("Ignoring group option without name or prefixes: %s", option)
            continue
        by_name[rule.name] = rule
    return GroupRules(by_name.values())
