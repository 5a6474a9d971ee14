# -------------------------------------------------------------
# @file          qualifier_decorator.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Wraps qualified identifiers in _<qual>_sta /
#                _<qual>_end markers for backend macros
# @license       MIT
# -------------------------------------------------------------

from glslport.preprocessor_utils import QUALIFIER_PATTERN, QUALIFIER_REPLACEMENT
from glslport.rewrite_rule import RewriteRule

QUALIFIER_RULE = RewriteRule('qualifier', QUALIFIER_PATTERN, QUALIFIER_REPLACEMENT)


class QualifierDecorator:
    @staticmethod
    def refactor(src: str) -> str:
        return QUALIFIER_RULE.apply(src)
