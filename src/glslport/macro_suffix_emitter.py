# -------------------------------------------------------------
# @file          macro_suffix_emitter.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Renders the shared variable macros appended
#                to the end of the processed source
# @license       MIT
# -------------------------------------------------------------

import logging
logger = logging.getLogger(__name__)

from jinja2 import DictLoader, Environment, StrictUndefined

from glslport.preprocessor_utils import SHARED_VARS_TEMPLATE, SHARED_VARS_TEMPLATE_NAME
from glslport.shared_variable import SharedVariable

_env = Environment(
    loader=DictLoader({SHARED_VARS_TEMPLATE_NAME: SHARED_VARS_TEMPLATE}),
    autoescape=False,
    trim_blocks=False,
    lstrip_blocks=False,
    keep_trailing_newline=True,
    undefined=StrictUndefined,
)


class MacroSuffixEmitter:
    """
    Metal can't declare threadgroup variables at global scope, they have to
    live inside the entry point. The backend wraps the source in a class whose
    members reference those variables, so the declarations are moved out via
    four macros:

        class Wrapper {
        threadgroup float (&foo);              // source, through _shared_sta/_end
        threadgroup float (&bar)[10];
        Wrapper(<PREFIX>_ARGS) <PREFIX>_ASSIGN {}
        };
        kernel entry_point() {
        <PREFIX>_DECLARE
        Wrapper wrapper <PREFIX>_PASS;
        }

    All four list the variables in declaration order, the backend pairs them
    up by position.
    """

    @staticmethod
    def emit(shared_vars: list[SharedVariable], prefix: str = 'MSL_SHARED_VARS') -> str:
        if not shared_vars: return ''

        logger.debug("Emitting %s macros for %d shared variable(s)", prefix, len(shared_vars))
        template = _env.get_template(SHARED_VARS_TEMPLATE_NAME)
        return template.render(prefix=prefix, shared_vars=shared_vars)
