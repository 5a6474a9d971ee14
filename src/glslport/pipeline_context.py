# -------------------------------------------------------------
# @file          pipeline_context.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   State of a single preprocessor run
# @license       MIT
# -------------------------------------------------------------

from dataclasses import dataclass, field

from glslport.config import PreprocessorConfig
from glslport.diagnostic import ReportError
from glslport.shared_variable import SharedVariable


@dataclass(slots=True)
class PipelineContext:
    src: str # current text, replaced after every pass
    config: PreprocessorConfig
    report: ReportError
    shared_vars: list[SharedVariable] = field(
        default_factory=list
    )
