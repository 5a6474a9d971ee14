# -------------------------------------------------------------
# @file          preprocessor.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Runs every pass over a shader source, in
#                order, and appends the shared variable macros
# @license       MIT
# -------------------------------------------------------------

import logging
logger = logging.getLogger(__name__)

from glslport.array_constructor_rewriter import ArrayConstructorRewriter
from glslport.comment_stripper import CommentStripper
from glslport.config import PreprocessorConfig
from glslport.constructor_linter import ConstructorLinter
from glslport.diagnostic import ReportError, guard, no_report
from glslport.directive_mutator import DirectiveMutator
from glslport.macro_suffix_emitter import MacroSuffixEmitter
from glslport.pipeline_context import PipelineContext
from glslport.qualifier_decorator import QualifierDecorator
from glslport.shared_variable_extractor import SharedVariableExtractor


class Preprocessor:
    """
    Mutates GLSL into cross API source that the different GPU backends can
    interpret. Some syntax is rewritten, some is only reported.

    Holds nothing but its config: every call gets a fresh PipelineContext, so
    one instance can serve any number of (concurrent) calls.
    """

    def __init__(self, config: PreprocessorConfig | None = None) -> None:
        self.config = config or PreprocessorConfig()

    def process(self, src: str, report_error: ReportError = no_report) -> str:
        ctx = PipelineContext(src=src, config=self.config, report=guard(report_error))
        logger.info("Processing shader source (%d lines)", src.count('\n') + 1)

        ctx.src = CommentStripper.strip(ctx.src, ctx.report)
        ctx.shared_vars.extend(SharedVariableExtractor.extract(ctx.src))
        self._lint(ctx)

        ctx.src = DirectiveMutator.refactor(ctx.src)
        ctx.src = QualifierDecorator.refactor(ctx.src)
        ctx.src = ArrayConstructorRewriter.refactor(ctx.src)

        # last: needs the final list and must follow the mutated text
        suffix = MacroSuffixEmitter.emit(ctx.shared_vars, self.config.shared_vars_macro_prefix)
        return ctx.src + suffix

    @staticmethod
    def _lint(ctx: PipelineContext) -> None:
        cfg = ctx.config
        if not (cfg.lints_matrix or cfg.lints_array):
            logger.debug("Linting disabled")
            return
        found = ConstructorLinter.lint(ctx.src, ctx.report, matrix=cfg.lints_matrix, array=cfg.lints_array)
        if found: logger.debug("Linting reported %d issue(s)", found)


def process(
    src: str,
    do_linting: bool = False,
    do_string_mutation: bool = False,
    do_include_mutation: bool = False,
    report_error: ReportError | None = None,
) -> str:
    """
    Process a single source. Called with the source alone this is the
    lenient variant meant for python authored shaders: no linting and
    errors are dropped.
    """
    config = PreprocessorConfig(
        do_linting=do_linting,
        do_string_mutation=do_string_mutation,
        do_include_mutation=do_include_mutation,
    )
    return Preprocessor(config).process(src, report_error if report_error is not None else no_report)
