# -*- coding: utf-8 -*-
"""
Validation of input schema documents.

Note:
    This module is only concerned with the rules specific to input documents
    (which types can be declared and how). SDL validity itself is checked by
    `graphql-core` when compiling.
"""

# flake8: noqa

from .registry import Rule, RuleRegistry
from .rules import SPECIFIED_RULES

__all__ = ("Rule", "RuleRegistry", "SPECIFIED_RULES")
