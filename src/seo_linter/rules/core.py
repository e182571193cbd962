# src/seo_linter/rules/core.py
from typing import Any, Callable, Union

from bs4 import BeautifulSoup

from seo_linter.model import (
    Renderer,
    RuleContext,
    RuleOutcome,
    PassOutcome,
    WarningOutcome,
    ErrorOutcome,
)

# A validator receives the resolved document and the page context.
Validator = Callable[[BeautifulSoup, RuleContext], Any]


def ok() -> PassOutcome:
    return PassOutcome()


def warning(message: str) -> WarningOutcome:
    return WarningOutcome(message=message)


def error(message: str) -> ErrorOutcome:
    return ErrorOutcome(message=message)


def rule_spec(name: str, renderer: Union[Renderer, str] = Renderer.SERVER, description: str = ""):
    """
    Decorator to declare a validator function as a lint rule.
    Facilitates auto-discovery by the RuleLoader and Rule.from_function.
    """
    def decorator(func):
        func.rule_name = name
        func.default_renderer = Renderer(renderer)
        func.rule_description = description or (func.__doc__ or "").strip()
        return func
    return decorator


class Rule:
    """
    A named validator bound to the rendering it prefers to run against.

    The name is the rule's identity inside a RuleRegistry.
    """

    def __init__(
            self,
            name: str,
            validator: Validator,
            default_renderer: Union[Renderer, str] = Renderer.SERVER,
            description: str = ""
    ):
        if not name:
            raise ValueError("A rule needs a non-empty name.")
        if not callable(validator):
            raise TypeError(f"Validator for rule '{name}' is not callable.")

        self._name = name
        self._validator = validator
        self._default_renderer = Renderer(default_renderer)
        self._description = description

    @classmethod
    def from_function(cls, func: Callable) -> "Rule":
        """Builds a Rule from a function decorated with @rule_spec."""
        if not hasattr(func, 'rule_name'):
            raise TypeError(f"{func!r} is not decorated with @rule_spec.")
        return cls(
            name=func.rule_name,
            validator=func,
            default_renderer=func.default_renderer,
            description=func.rule_description
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def default_renderer(self) -> Renderer:
        return self._default_renderer

    @property
    def description(self) -> str:
        return self._description

    @property
    def validator(self) -> Validator:
        return self._validator

    def validate(self, document: BeautifulSoup, context: RuleContext) -> Any:
        """Runs the rule's own validator. The return value is checked by the RuleInvoker."""
        return self._validator(document, context)

    def __repr__(self) -> str:
        return f"Rule(name={self._name!r}, default_renderer={self._default_renderer.value!r})"


def collect_outcome(errors: list, warnings: list) -> RuleOutcome:
    """Folds the findings of a multi-check rule into one outcome; errors win over warnings."""
    if errors:
        return error("\n".join(errors + warnings))
    if warnings:
        return warning("\n".join(warnings))
    return ok()
