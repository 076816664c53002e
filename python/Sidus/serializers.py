#!/usr/bin/python
# -*- coding:utf-8 -*-
"""
Rendering of selected stars as CSV text or as a C header

The C header is single-file-library style: including it gives the
struct declaration and an extern pointer, defining
SIDUS_IMPLEMENTATION before including it in exactly one translation
unit emits the star array itself.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Sequence, Tuple

from Sidus.format_detect import Epoch
from Sidus.star_record import StarRecord

IMPLEMENTATION_MACRO = "SIDUS_IMPLEMENTATION"


class Precision(Enum):
    SINGLE = "single"
    DOUBLE = "double"


class OutputFormat(Enum):
    TEXT = "text"
    C_HEADER = "c"


# Digits after the decimal point per precision
DIGITS = {Precision.SINGLE: 9, Precision.DOUBLE: 17}
C_TYPES = {Precision.SINGLE: "float", Precision.DOUBLE: "double"}


@dataclass(frozen=True)
class OutputConfig:
    precision: Precision = Precision.DOUBLE
    names: bool = False
    spectral_type: bool = False
    output_format: OutputFormat = OutputFormat.TEXT


def sanitize_identifier(text: str) -> str:
    """
    Turn an arbitrary string (usually the input path) into a C identifier

    >>> sanitize_identifier("catalogs/BSC5")
    'catalogs_bsc5'
    """
    if not text:
        return "x"
    result = []
    for i, c in enumerate(text.lower()):
        if i == 0:
            result.append(c if c.isascii() and c.isalpha() else "x")
        else:
            result.append(c if c.isascii() and c.isalnum() else "_")
    return "".join(result)


def _c_string(text: str) -> str:
    text = text.split("\x00", 1)[0]
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


def format_text_line(star: StarRecord, config: OutputConfig) -> str:
    digits = DIGITS[config.precision]
    fields = []
    if config.names:
        fields.append(star.name)
    fields.extend(
        f"%.{digits}f" % float(v)
        for v in (star.right_ascension, star.declination, star.magnitude)
    )
    if config.spectral_type:
        fields.append(star.spectral_type.split("\x00", 1)[0])
    return ",".join(fields) + "\n"


def format_text(stars: Sequence[Tuple[int, StarRecord]], config: OutputConfig) -> str:
    return "".join(format_text_line(star, config) for _, star in stars)


def format_c_entry(star: StarRecord, config: OutputConfig) -> str:
    digits = DIGITS[config.precision]
    values = ", ".join(
        f"% .{digits}f" % float(v)
        for v in (star.right_ascension, star.declination, star.magnitude)
    )
    entry = "\n\t{ " + values
    if config.names:
        entry += ", " + _c_string(star.name)
    if config.spectral_type:
        entry += ", " + _c_string(star.spectral_type)
    return entry + " }"


def format_c_header(
    stars: Sequence[Tuple[int, StarRecord]],
    config: OutputConfig,
    input_name: str,
    epoch: Epoch,
) -> str:
    var = sanitize_identifier(input_name)
    num_stars = len(stars)
    ctype = C_TYPES[config.precision]

    lines: List[str] = [
        "/*\n"
        f" * Auto-generated from catalog {input_name} by the sidus program\n"
        " *\n"
        " * Do this:\n"
        f" *   #define {IMPLEMENTATION_MACRO}\n"
        " * before you include this file in *one* C or C++ file to create the implementation\n"
        " *\n"
        " */\n\n",
        f"#ifndef {var}_h\n#define {var}_h\n\n",
        '#ifdef __cplusplus\nextern "C" {\n#endif\n\n',
        "struct Star {\n",
        f"\t{ctype} rightAscension;\t/* radians, {epoch.value} */\n",
        f"\t{ctype} declination;\t/* radians, {epoch.value} */\n",
        f"\t{ctype} magnitude;\n",
    ]
    if config.names:
        lines.append("\tconst char *name;\n")
    if config.spectral_type:
        lines.append("\tconst char *type;\n")
    lines.append(
        "};\n\n"
        f"enum {{ {var}_num_stars = {num_stars} }};\n\n"
        f"#ifndef {IMPLEMENTATION_MACRO}\n"
        f"extern const struct Star * {var}_stars;\n"
        "#else\n"
        f"const struct Star {var}_stars[{num_stars}] = {{"
    )
    lines.append(", ".join(format_c_entry(star, config) for _, star in stars))
    lines.append(
        "\n};\n\n"
        "#endif\n\n"
        "#ifdef __cplusplus\n"
        "}\n"
        "#endif\n\n"
        "#endif\n"
    )
    return "".join(lines)


def serialize(
    stars: Sequence[Tuple[int, StarRecord]],
    config: OutputConfig,
    input_name: str,
    epoch: Epoch,
) -> str:
    if config.output_format == OutputFormat.C_HEADER:
        return format_c_header(stars, config, input_name, epoch)
    return format_text(stars, config)
