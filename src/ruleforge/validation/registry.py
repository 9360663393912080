"""Rule registry for ruleforge.

Provides registration and lookup of named rule functions. A registry is a
plain instance so tests and applications can keep isolated rule sets;
`default_registry` is the process-wide instance used when none is given.
"""

import logging
from collections.abc import Callable, Mapping

from ruleforge.validation.errors import RuleRegistrationError
from ruleforge.validation.types import RuleFn

logger = logging.getLogger(__name__)


class RuleRegistry:
    """Registry mapping rule names to rule functions.

    Registration always overwrites: the last function registered under a
    name wins, with no versioning. There is no removal operation apart from
    `clear()`, which exists for tests.

    Example:
        registry = RuleRegistry()
        registry.register_rule("IsEven", lambda ctx: ctx.value % 2 == 0 or "must be even")

        # Later, resolve by name
        rule_fn = registry.find_registered_rule("IsEven")
    """

    def __init__(self, rules: Mapping[str, RuleFn] | None = None):
        self._rules: dict[str, RuleFn] = {}
        self._aliases: dict[str, str] = {}
        for name, rule_fn in (rules or {}).items():
            self.register_rule(name, rule_fn)

    def register_rule(self, name: str, rule_fn: RuleFn) -> None:
        """Register a rule function by name, replacing any previous binding.

        Args:
            name: Non-empty rule name (e.g., "MinLength")
            rule_fn: Callable receiving a RuleContext

        Raises:
            RuleRegistrationError: If the name is empty or rule_fn is not callable
        """
        if not isinstance(name, str) or not name.strip():
            raise RuleRegistrationError(f"Rule name must be a non-empty string, got {name!r}")
        if not callable(rule_fn):
            raise RuleRegistrationError(f"Rule '{name}' must be callable")
        previous = self._rules.get(name)
        if previous is not None and previous is not rule_fn:
            logger.debug("Rule '%s' re-registered, previous binding replaced", name)
        self._rules[name] = rule_fn

    def alias(self, alias_name: str, canonical_name: str) -> None:
        """Make `alias_name` resolve to whatever `canonical_name` is bound to.

        The alias follows later re-registrations of the canonical rule. A
        rule registered directly under `alias_name` takes precedence.

        Raises:
            RuleRegistrationError: If the alias name is empty or the
                canonical rule is not registered
        """
        if not isinstance(alias_name, str) or not alias_name.strip():
            raise RuleRegistrationError(f"Alias name must be a non-empty string, got {alias_name!r}")
        if canonical_name not in self._rules:
            raise RuleRegistrationError(
                f"Cannot alias '{alias_name}': rule '{canonical_name}' is not registered"
            )
        self._aliases[alias_name] = canonical_name

    def find_registered_rule(self, name: str) -> RuleFn | None:
        """Return the rule function bound to `name`, or None."""
        if not isinstance(name, str) or not name:
            return None
        rule_fn = self._rules.get(name)
        if rule_fn is None and name in self._aliases:
            rule_fn = self._rules.get(self._aliases[name])
        return rule_fn

    def get_rules(self) -> dict[str, RuleFn]:
        """Snapshot of all bindings (aliases included); safe to mutate."""
        rules = {
            alias: self._rules[canonical]
            for alias, canonical in self._aliases.items()
            if canonical in self._rules
        }
        rules.update(self._rules)
        return rules

    def is_registered(self, name: str) -> bool:
        """Check if a rule (or alias) is registered."""
        return self.find_registered_rule(name) is not None

    def list_registered(self) -> list[str]:
        """List all registered rule and alias names."""
        return sorted(self.get_rules())

    def clear(self) -> None:
        """Clear all registrations. Primarily for testing."""
        self._rules.clear()
        self._aliases.clear()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_registered(name)

    def __len__(self) -> int:
        return len(self.get_rules())


default_registry = RuleRegistry()


def rule(name: str, registry: RuleRegistry | None = None) -> Callable[[RuleFn], RuleFn]:
    """Decorator to register a rule function.

    Usage:
        @rule("IsEven")
        def is_even(ctx: RuleContext) -> bool | str:
            return ctx.value % 2 == 0 or "must be even"
    """

    def decorator(fn: RuleFn) -> RuleFn:
        (registry if registry is not None else default_registry).register_rule(name, fn)
        return fn

    return decorator
