# src/seo_linter/managers/rule_loader.py
import importlib.util
import logging
from pathlib import Path
from typing import List, Union

from seo_linter.rules.core import Rule

logger = logging.getLogger(__name__)


class RuleLoadError(Exception):
    """A custom rule directory could not be loaded."""


class RuleLoader:
    """Discovers and loads custom rules from a directory of Python files."""

    def __init__(self, rules_dir: Union[str, Path]):
        self.rules_dir = Path(rules_dir)
        logger.debug("Custom rules directory is set to: %s", self.rules_dir)

    def discover_rule_files(self) -> List[Path]:
        """
        Searches for rule modules in the rules directory and all subdirectories.
        Files starting with an underscore are treated as private helpers.
        """
        if not self.rules_dir.is_dir():
            raise RuleLoadError(f"Rules directory not found: {self.rules_dir}")
        return sorted(p for p in self.rules_dir.glob("**/*.py") if not p.name.startswith("_"))

    def load(self) -> List[Rule]:
        """
        Imports every rule module and collects its rules.

        A module contributes each module-level Rule instance and each function
        decorated with @rule_spec, in definition order.

        Raises:
            RuleLoadError: If the directory is missing, a module fails to import,
                or a module defines no rules.
        """
        rules: List[Rule] = []
        for rule_file in self.discover_rule_files():
            module_rules = self._load_file(rule_file)
            if not module_rules:
                raise RuleLoadError(f"{rule_file} does not define any rule.")
            rules.extend(module_rules)

        logger.info("Loaded %d custom rule(s) from %s", len(rules), self.rules_dir)
        return rules

    def _load_file(self, rule_file: Path) -> List[Rule]:
        module_name = f"seo_linter_custom_rule_{rule_file.stem}"
        try:
            spec = importlib.util.spec_from_file_location(module_name, rule_file)
            if not spec or not spec.loader:
                raise ImportError(f"Could not create a module spec for {rule_file}")

            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)
        except Exception as e:
            raise RuleLoadError(f"Failed to import rule file {rule_file}: {e}") from e

        members = list(vars(module).values())
        # Functions already wrapped in an explicit Rule are only counted once.
        wrapped = {id(attr.validator) for attr in members if isinstance(attr, Rule)}

        found: List[Rule] = []
        for attr in members:
            if isinstance(attr, Rule):
                found.append(attr)
            elif (
                    callable(attr)
                    and hasattr(attr, "rule_name")
                    and getattr(attr, "__module__", None) == module_name
                    and id(attr) not in wrapped
            ):
                found.append(Rule.from_function(attr))

        logger.debug("Loaded %d rule(s) from %s", len(found), rule_file)
        return found
