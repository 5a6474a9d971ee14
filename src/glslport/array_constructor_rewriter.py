# -------------------------------------------------------------
# @file          array_constructor_rewriter.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Turns `= T[n](...)` into ARRAY_T/ARRAY_V
#                macro calls
# @license       MIT
# -------------------------------------------------------------

from glslport.preprocessor_utils import ARRAY_CONSTRUCTOR_PATTERN, ARRAY_CONSTRUCTOR_REPLACEMENT
from glslport.rewrite_rule import RewriteRule

# the size expression is dropped, each backend sizes the array itself
ARRAY_CONSTRUCTOR_RULE = RewriteRule('array_constructor', ARRAY_CONSTRUCTOR_PATTERN, ARRAY_CONSTRUCTOR_REPLACEMENT)


class ArrayConstructorRewriter:
    @staticmethod
    def refactor(src: str) -> str:
        return ARRAY_CONSTRUCTOR_RULE.apply(src)
