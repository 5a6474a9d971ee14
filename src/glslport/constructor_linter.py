# -------------------------------------------------------------
# @file          constructor_linter.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Reports constructor syntax that doesn't
#                translate to every backend
# @license       MIT
# -------------------------------------------------------------

import logging
logger = logging.getLogger(__name__)

from dataclasses import dataclass

import regex as re

from glslport.diagnostic import ReportError
from glslport.preprocessor_utils import *
from glslport.rewrite_rule import scan


@dataclass(slots=True, frozen=True)
class LintRule:
    name: str
    pattern: re.Pattern
    message: str


# both only catch some invalid usage, the shader compiler catches the rest
MATRIX_RESHAPE_RULE = LintRule('matrix_reshape', MATRIX_CONSTRUCTOR_PATTERN, MATRIX_CONSTRUCTOR_MESSAGE)
ARRAY_CONSTRUCTOR_RULE = LintRule('array_constructor', ARRAY_CONSTRUCTOR_PATTERN, ARRAY_CONSTRUCTOR_MESSAGE)


class ConstructorLinter:
    @staticmethod
    def lint(src: str, report: ReportError, *, matrix: bool = True, array: bool = True) -> int:
        """Report every offending constructor, returns how many were found."""
        rules = [
            rule for rule, enabled in ((MATRIX_RESHAPE_RULE, matrix), (ARRAY_CONSTRUCTOR_RULE, array))
            if enabled
        ]

        found = 0
        for rule in rules:
            for match in scan(rule.pattern, src):
                logger.debug("Lint '%s' matched '%s'", rule.name, match.group(0).strip())
                report(src, match, rule.message)
                found += 1
        return found
