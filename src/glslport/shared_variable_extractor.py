# -------------------------------------------------------------
# @file          shared_variable_extractor.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Collects shared (threadgroup) declarations
#                that some backends can't keep at global scope
# @license       MIT
# -------------------------------------------------------------

import logging
logger = logging.getLogger(__name__)

from glslport.preprocessor_utils import SHARED_VAR_PATTERN
from glslport.rewrite_rule import scan
from glslport.shared_variable import SharedVariable


class SharedVariableExtractor:
    @staticmethod
    def extract(src: str) -> list[SharedVariable]:
        # must see the text before QualifierDecorator touches `shared`
        shared_vars: list[SharedVariable] = []
        for match in scan(SHARED_VAR_PATTERN, src):
            dtype, name, array = match.groups()
            logger.debug("Found shared variable '%s' of type %s%s", name, dtype, array)
            shared_vars.append(SharedVariable(dtype, name, array))
        return shared_vars
