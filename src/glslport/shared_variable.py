# -------------------------------------------------------------
# @file          shared_variable.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Shared (threadgroup) variable dataclass
# @license       MIT
# -------------------------------------------------------------

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class SharedVariable:
    type: str
    name: str
    array: str = ''  # raw text between name and ';', e.g. "[10]"
