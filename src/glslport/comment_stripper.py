# -------------------------------------------------------------
# @file          comment_stripper.py
# @author        Priyangkar Ghosh
# @created       2025-08-02
# @description   Blanks out comments while keeping every
#                newline in place
# @license       MIT
# -------------------------------------------------------------

import logging
logger = logging.getLogger(__name__)

from glslport.diagnostic import ReportError
from glslport.preprocessor_utils import *


class CommentStripper:
    """
    Replaces comment bodies with spaces so line numbers survive.

    On an unterminated comment the error is reported and the text blanked so
    far is returned as is; the rest of the pipeline still runs on it. String
    literals are not recognised, a `//` inside quotes starts a comment.
    """

    @classmethod
    def strip(cls, src: str, report: ReportError) -> str:
        logger.debug("Stripping comments")
        out, ok = cls._strip_block_comments(src)
        if not ok:
            report(src, None, MALFORMED_BLOCK_COMMENT)
            return out

        out, ok = cls._strip_line_comments(out)
        if not ok:
            report(src, None, MALFORMED_LINE_COMMENT)
            return out

        return TRAILING_SPACES_PATTERN.sub('\n', out)

    @staticmethod
    def _strip_block_comments(src: str) -> tuple[str, bool]:
        chars = list(src)
        search_pos: int = 0
        while (start := src.find(BLOCK_COMMENT_OPEN, search_pos)) != -1:
            # the opener itself can't close the block: "/*/" stays open
            end = src.find(BLOCK_COMMENT_CLOSE, start + 2)
            if end == -1: return ''.join(chars), False

            for i in range(start, end + 2):
                if chars[i] != '\n': chars[i] = ' '
            search_pos = end + 2
        return ''.join(chars), True

    @staticmethod
    def _strip_line_comments(src: str) -> tuple[str, bool]:
        chars = list(src)
        search_pos: int = 0
        while (start := src.find(LINE_COMMENT_OPEN, search_pos)) != -1:
            end = src.find('\n', start + 2)
            if end == -1: return ''.join(chars), False

            chars[start:end] = ' ' * (end - start)
            search_pos = end
        return ''.join(chars), True
