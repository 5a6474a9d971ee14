import regex as re


# ──────────────────────────────────────────────────────────────────────────────
# comments
# ──────────────────────────────────────────────────────────────────────────────
BLOCK_COMMENT_OPEN = '/*'
BLOCK_COMMENT_CLOSE = '*/'
LINE_COMMENT_OPEN = '//'

# spaces left dangling before a newline once comments are blanked
TRAILING_SPACES_PATTERN = re.compile(r' +\n')

MALFORMED_BLOCK_COMMENT = "Malformed multi-line comment."
MALFORMED_LINE_COMMENT = "Malformed single line comment, missing newline."

# ──────────────────────────────────────────────────────────────────────────────
# declarations / rewrites
# ──────────────────────────────────────────────────────────────────────────────
# "shared <type> <name><array>;"
SHARED_VAR_PATTERN = re.compile(r'shared\s+(\w+)\s+(\w+)([^;]*);')

# `#include "deps.glsl"` -> `//include "deps.glsl"`
DIRECTIVE_PATTERN = re.compile(r'#\s*(include|pragma once)')
DIRECTIVE_REPLACEMENT = r'//\1'

# `out float var[2]` -> `out float _out_sta var _out_end[2]`
QUALIFIER_PATTERN = re.compile(r'(out|inout|in|shared)\s+(\w+)\s+(\w+)')
QUALIFIER_REPLACEMENT = r'\1 \2 _\1_sta \3 _\1_end'

# `= float[2](0.0, 0.0)` -> `= ARRAY_T(float) ARRAY_V(0.0, 0.0)`
ARRAY_CONSTRUCTOR_PATTERN = re.compile(r'=\s*(\w+)\s*\[[^\]]*\]\s*\(')
ARRAY_CONSTRUCTOR_REPLACEMENT = r'= ARRAY_T(\1) ARRAY_V('

# ──────────────────────────────────────────────────────────────────────────────
# linting
# ──────────────────────────────────────────────────────────────────────────────
# `mat4(other_mat)`: single argument with no digit, comma or space
MATRIX_CONSTRUCTOR_PATTERN = re.compile(r'\s+(mat(\d|\dx\d)|float\dx\d)\([^,\s\d]+\)')

MATRIX_CONSTRUCTOR_MESSAGE = (
    "Matrix constructor is not cross API compatible. "
    "Use to_floatNxM to reshape the matrix or use other constructors instead."
)
ARRAY_CONSTRUCTOR_MESSAGE = (
    "Array constructor is not cross API compatible. Use type_array instead of type[]."
)

# ──────────────────────────────────────────────────────────────────────────────
# shared variable macros
# -> consumed by the backend wrapper generator, keep the text stable
# ──────────────────────────────────────────────────────────────────────────────
SHARED_VARS_TEMPLATE_NAME = 'shared_vars'
SHARED_VARS_TEMPLATE = (
    # arguments of the wrapper class constructor
    "#undef {{ prefix }}_ARGS\n"
    # reference assignment inside the wrapper class constructor
    "#undef {{ prefix }}_ASSIGN\n"
    # threadgroup declarations inside the entry point
    "#undef {{ prefix }}_DECLARE\n"
    # arguments of the wrapper class constructor call
    "#undef {{ prefix }}_PASS\n"
    "#define {{ prefix }}_ARGS "
    "{% for var in shared_vars %}{{ ' ' if loop.first else ',' }}"
    "threadgroup {{ var.type }}(&_{{ var.name }}){{ var.array }}{% endfor %}\n"
    "#define {{ prefix }}_ASSIGN "
    "{% for var in shared_vars %}{{ ':' if loop.first else ',' }}"
    "{{ var.name }}(_{{ var.name }}){% endfor %}\n"
    "#define {{ prefix }}_DECLARE "
    "{% for var in shared_vars %}"
    "threadgroup {{ var.type }} {{ var.name }}{{ var.array }};{% endfor %}\n"
    "#define {{ prefix }}_PASS ("
    "{% for var in shared_vars %}{{ ' ' if loop.first else ',' }}{{ var.name }}{% endfor %})\n"
)
