"""
Pipeline tests for Preprocessor and the module level process().
"""

import logging

import pytest

import glslport
from glslport import DiagnosticCollector, Preprocessor, PreprocessorConfig, log_report, process
from glslport.preprocessor_utils import (
    ARRAY_CONSTRUCTOR_MESSAGE,
    MALFORMED_BLOCK_COMMENT,
    MALFORMED_LINE_COMMENT,
    MATRIX_CONSTRUCTOR_MESSAGE,
)

COMPUTE_SRC = """\
#pragma once
#include "common.glsl" /* shared helpers */

shared float foo;   // first
shared float bar[10];

void store(in uint idx, out float value)
{
  float weights[2] = float[2](0.5, 0.5);
  value = foo + bar[idx] * weights[0];
}
"""

COMPUTE_EXPECTED = """\
//pragma once
//include "common.glsl"

shared float _shared_sta foo _shared_end;
shared float _shared_sta bar _shared_end[10];

void store(in uint _in_sta idx _in_end, out float _out_sta value _out_end)
{
  float weights[2] = ARRAY_T(float) ARRAY_V(0.5, 0.5);
  value = foo + bar[idx] * weights[0];
}
#undef MSL_SHARED_VARS_ARGS
#undef MSL_SHARED_VARS_ASSIGN
#undef MSL_SHARED_VARS_DECLARE
#undef MSL_SHARED_VARS_PASS
#define MSL_SHARED_VARS_ARGS  threadgroup float(&_foo),threadgroup float(&_bar)[10]
#define MSL_SHARED_VARS_ASSIGN :foo(_foo),bar(_bar)
#define MSL_SHARED_VARS_DECLARE threadgroup float foo;threadgroup float bar[10];
#define MSL_SHARED_VARS_PASS ( foo,bar)
"""


def test_full_pipeline(preprocessor, collector):
    assert preprocessor.process(COMPUTE_SRC, collector) == COMPUTE_EXPECTED
    assert collector.messages == [ARRAY_CONSTRUCTOR_MESSAGE]


def test_convenience_form_is_lenient():
    assert process(COMPUTE_SRC) == COMPUTE_EXPECTED


def test_no_suffix_without_shared_variables(preprocessor):
    assert preprocessor.process("void main() {}\n") == "void main() {}\n"


def test_same_input_same_output(preprocessor):
    first = preprocessor.process(COMPUTE_SRC)
    second = preprocessor.process(COMPUTE_SRC)
    assert first == second
    # shared variables of the first run don't leak into the second
    assert first.count("#define MSL_SHARED_VARS_DECLARE") == 1
    assert second.endswith("#define MSL_SHARED_VARS_PASS ( foo,bar)\n")


def test_separate_runs_do_not_share_variables(preprocessor):
    preprocessor.process("shared float foo;\n")
    out = preprocessor.process("shared int bar;\n")
    assert "foo" not in out
    assert "#define MSL_SHARED_VARS_PASS ( bar)\n" in out


def test_matrix_reshape_reported_when_linting(collector):
    process("void f() {\n  mat4 m = mat4(x);\n}\n", do_linting=True, report_error=collector)
    assert collector.messages == [MATRIX_CONSTRUCTOR_MESSAGE]
    assert collector.items[0].line_no == 2


def test_matrix_reshape_silent_without_linting():
    calls = []
    sink = lambda *args: calls.append(args)
    src = "void f() {\n  mat4 m = mat4(x);\n}\n"

    process(src, do_linting=False, report_error=sink)
    assert calls == []

    # same sink, linting on
    process(src, do_linting=True, report_error=sink)
    assert [message for _, _, message in calls] == [MATRIX_CONSTRUCTOR_MESSAGE]


def test_empty_collector_receives_diagnostics():
    collector = DiagnosticCollector()
    process("float a[2] = float[2](0.0, 0.0);\n/* open", do_linting=True, report_error=collector)
    assert collector.messages == [MALFORMED_BLOCK_COMMENT, ARRAY_CONSTRUCTOR_MESSAGE]


def test_collector_is_truthy_when_empty():
    assert DiagnosticCollector()


def test_single_check_can_be_disabled(collector):
    config = PreprocessorConfig(lint_array_constructors=False)
    Preprocessor(config).process("mat4 m = mat4(x);\nfloat a[1] = float[1](x);\n", collector)
    assert collector.messages == [MATRIX_CONSTRUCTOR_MESSAGE]


def test_lint_ignores_commented_code(preprocessor, collector):
    preprocessor.process("// mat4 m = mat4(x);\n/* float a[1] = float[1](x); */\n", collector)
    assert len(collector.items) == 0


def test_unterminated_block_comment_continues(preprocessor, collector):
    src = "#include \"a.glsl\"\nout float x;\n/* never closed"
    result = preprocessor.process(src, collector)

    assert collector.messages == [MALFORMED_BLOCK_COMMENT]
    # later passes still ran on the partial text
    assert result.startswith("//include \"a.glsl\"\nout float _out_sta x _out_end;\n")


def test_unterminated_line_comment_continues(preprocessor, collector):
    src = "void main() {}\n// no newline"
    result = preprocessor.process(src, collector)

    assert collector.messages == [MALFORMED_LINE_COMMENT]
    assert result == src


@pytest.mark.parametrize("src", [
    COMPUTE_SRC,
    "/*\n * header\n */\nvoid main() {}\n",
    "int a; // x\n\n\nint b; /* y */\n",
])
def test_line_count_is_preserved(src):
    # compare up to the macro suffix
    result = Preprocessor().process(src)
    body = result.split("#undef MSL_SHARED_VARS_ARGS")[0]
    assert body.count('\n') == src.count('\n')


def test_failing_sink_does_not_stop_pipeline(preprocessor):
    def broken_sink(snapshot, match, message):
        raise RuntimeError("sink is down")

    result = preprocessor.process("float a[2] = float[2](0.0, 1.0);\n", broken_sink)
    assert result == "float a[2] = ARRAY_T(float) ARRAY_V(0.0, 1.0);\n"


def test_custom_macro_prefix():
    config = PreprocessorConfig(shared_vars_macro_prefix='GROUP_VARS')
    result = Preprocessor(config).process("shared uint hits;\n")
    assert result.endswith("#define GROUP_VARS_PASS ( hits)\n")


def test_invalid_macro_prefix():
    with pytest.raises(ValueError):
        PreprocessorConfig(shared_vars_macro_prefix='1 bad')


def test_log_report(caplog):
    with caplog.at_level(logging.WARNING, logger="glslport.diagnostic"):
        process("void f() {\n  mat4 m = mat4(x);\n}\n", do_linting=True, report_error=log_report)

    assert "line 2: Matrix constructor is not cross API compatible." in caplog.text
    assert "'mat4(x)'" in caplog.text


def test_public_api():
    for name in glslport.__all__:
        assert hasattr(glslport, name)
