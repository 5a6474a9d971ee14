# -------------------------------------------------------------
# @file          config.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Per-preprocessor feature toggles
# @license       MIT
# -------------------------------------------------------------

from dataclasses import dataclass

import regex as re

IDENTIFIER_PATTERN = re.compile(r'[A-Za-z_]\w*')


@dataclass(slots=True, frozen=True)
class PreprocessorConfig:
    do_linting: bool = True
    lint_matrix_constructors: bool = True
    lint_array_constructors: bool = True

    # carried for callers, no pass reads them yet
    do_string_mutation: bool = False
    do_include_mutation: bool = False

    # name stem of the *_ARGS/_ASSIGN/_DECLARE/_PASS macros
    shared_vars_macro_prefix: str = 'MSL_SHARED_VARS'

    def __post_init__(self) -> None:
        if not IDENTIFIER_PATTERN.fullmatch(self.shared_vars_macro_prefix):
            raise ValueError(
                f"Invalid macro prefix '{self.shared_vars_macro_prefix}', "
                "expected a C identifier"
            )

    @property
    def lints_matrix(self) -> bool:
        return self.do_linting and self.lint_matrix_constructors

    @property
    def lints_array(self) -> bool:
        return self.do_linting and self.lint_array_constructors
