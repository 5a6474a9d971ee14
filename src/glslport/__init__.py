# -------------------------------------------------------------
# @file          __init__.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Initializes the glslport package
# @license       MIT
# -------------------------------------------------------------

import logging
logger = logging.getLogger(__name__)

from .config import PreprocessorConfig
from .diagnostic import Diagnostic, DiagnosticCollector, log_report, no_report
from .preprocessor import Preprocessor, process
from .shared_variable import SharedVariable

__all__ = [
    "Preprocessor",
    "PreprocessorConfig",
    "SharedVariable",
    "Diagnostic",
    "DiagnosticCollector",
    "log_report",
    "no_report",
    "process",
]
