# src/seo_linter/rules/registry.py
import importlib
import pkgutil
import logging
from typing import Dict, Iterable, Iterator, List, Optional

from .core import Rule

logger = logging.getLogger(__name__)


def discover_builtin_rules() -> List[Rule]:
    """
    Collects the built-in rules from the 'seo_linter.rules.builtin' package.

    Every module in the package exposing a `RULE` attribute (instance of `Rule`)
    contributes one rule. Modules are visited in name order, which makes the
    default registry order stable across runs.
    """
    import seo_linter.rules.builtin as builtin_pkg

    rules = []
    for _, name, _ in sorted(pkgutil.iter_modules(builtin_pkg.__path__), key=lambda m: m.name):
        module = importlib.import_module(f"seo_linter.rules.builtin.{name}")
        rule = getattr(module, "RULE", None)
        if isinstance(rule, Rule):
            rules.append(rule)
            logger.debug("Built-in rule loaded: %s", rule.name)
    return rules


class RuleRegistry:
    """
    Ordered registry of lint rules, keyed by rule name.

    Registering a name twice replaces the earlier rule (custom rules may shadow
    built-ins) while keeping its position in the run order.
    """

    def __init__(self, rules: Optional[Iterable[Rule]] = None):
        self._rules: Dict[str, Rule] = {}
        for rule in rules or []:
            self.register(rule)

    @classmethod
    def with_builtins(cls, extra_rules: Optional[Iterable[Rule]] = None) -> "RuleRegistry":
        """Creates a registry holding all built-in rules, followed by any extra (custom) rules."""
        registry = cls(discover_builtin_rules())
        for rule in extra_rules or []:
            registry.register(rule)
        return registry

    def register(self, rule: Rule) -> None:
        if not isinstance(rule, Rule):
            raise TypeError(f"Only Rule instances can be registered, got {type(rule).__name__}.")
        if rule.name in self._rules:
            logger.info("Rule '%s' is overridden by a later registration.", rule.name)
        self._rules[rule.name] = rule
        logger.debug("Registered rule '%s'", rule.name)

    def lookup(self, name: str) -> Optional[Rule]:
        return self._rules.get(name)

    def list_rules(self) -> List[Rule]:
        """Returns all registered rules in registration order."""
        return list(self._rules.values())

    def names(self) -> List[str]:
        return list(self._rules.keys())

    def __contains__(self, name: str) -> bool:
        return name in self._rules

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.list_rules())

    def __len__(self) -> int:
        return len(self._rules)
