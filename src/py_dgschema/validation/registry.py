# -*- coding: utf-8 -*-
""" Registry of named validation rules run against input documents. """

import logging
from typing import Callable, Iterable, Iterator, List, Optional

from ..exc import RuleViolation
from ..lang import Document

logger = logging.getLogger(__name__)

RuleFunc = Callable[[Document], Optional[RuleViolation]]


class Rule:
    """
    Named validation function.

    Args:
        name: Rule name, used to tag the reported errors
        func: Callable taking the document and returning at most one error
    """

    __slots__ = ("name", "func")

    def __init__(self, name: str, func: RuleFunc):
        self.name = name
        self.func = func

    def __call__(self, document: Document) -> Optional[RuleViolation]:
        return self.func(document)

    def __repr__(self) -> str:
        return "Rule(%s)" % self.name


class RuleRegistry:
    """
    Ordered, append-only collection of validation rules.

    Rules are registered at import time and the registry is then frozen,
    after which it can be shared freely between compilations.

    Args:
        rules: Initial rules
    """

    __slots__ = ("_rules", "_frozen")

    def __init__(self, rules: Iterable[Rule] = ()):
        self._rules = []  # type: List[Rule]
        self._frozen = False
        for rule in rules:
            self._append(rule)

    def __iter__(self) -> Iterator[Rule]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def __contains__(self, name: object) -> bool:
        return any(rule.name == name for rule in self._rules)

    def __repr__(self) -> str:
        return "<RuleRegistry %s>" % ", ".join(r.name for r in self._rules)

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def names(self) -> List[str]:
        return [rule.name for rule in self._rules]

    def _append(self, rule: Rule) -> None:
        if self._frozen:
            raise RuntimeError(
                'Cannot register rule "%s" on a frozen registry' % rule.name
            )
        if rule.name in self:
            raise RuntimeError('Rule "%s" is already registered' % rule.name)
        self._rules.append(rule)

    def register(self, name: str, func: RuleFunc) -> Rule:
        """
        Append a rule to the registry.

        Raises:
            RuntimeError: if the registry is frozen or ``name`` is already
                registered.
        """
        rule = Rule(name, func)
        self._append(rule)
        return rule

    def rule(self, name: str) -> Callable[[RuleFunc], RuleFunc]:
        """ Decorator form of :meth:`register`. """

        def decorator(func: RuleFunc) -> RuleFunc:
            self.register(name, func)
            return func

        return decorator

    def freeze(self) -> "RuleRegistry":
        self._frozen = True
        return self

    def validate(self, document: Document) -> List[RuleViolation]:
        """
        Run every rule in registration order.

        All rules run even if a previous one failed and each reported error
        is tagged with the name of the rule which reported it.

        Args:
            document: Parsed input document

        Returns:
            List of errors, empty if the document is valid
        """
        errors = []  # type: List[RuleViolation]
        for rule in self._rules:
            err = rule(document)
            if err is not None:
                err.rule = rule.name
                logger.debug("Rule %s failed: %s", rule.name, err)
                errors.append(err)
        return errors
