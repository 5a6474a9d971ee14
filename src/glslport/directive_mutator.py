# -------------------------------------------------------------
# @file          directive_mutator.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Disables #include and #pragma once
# @license       MIT
# -------------------------------------------------------------

from glslport.preprocessor_utils import DIRECTIVE_PATTERN, DIRECTIVE_REPLACEMENT
from glslport.rewrite_rule import RewriteRule

# dependencies are resolved before this runs, the lines only have to go silent
DIRECTIVE_RULE = RewriteRule('directive', DIRECTIVE_PATTERN, DIRECTIVE_REPLACEMENT)


class DirectiveMutator:
    @staticmethod
    def refactor(src: str) -> str:
        return DIRECTIVE_RULE.apply(src)
