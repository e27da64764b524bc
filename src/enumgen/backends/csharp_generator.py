"""
C# source generator for enum models.

Converts an EnumModel into the text of a C# source file:

    namespace My.Gen
    {
        using System.ComponentModel;

        public enum Colors
        {
            [Description("Bright red")]
            Red = 0,
            Green,
        }
    }

Formatting is controlled by RenderOptions:
    - brace_style: C (brace on its own line) or BLOCK (brace ends the line)
    - blank_lines_between_members: separate members with an empty line
Options only change whitespace, never the declarations emitted.
"""

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from enumgen.model import EnumModel, MemberEntry
from enumgen.expressions import Expression, Literal, ConstantReference
from enumgen.identifiers import is_valid_identifier


logger = logging.getLogger(__name__)


class BraceStyle(Enum):
    """Placement of opening braces."""
    C = "c"            # Brace on its own line
    BLOCK = "block"    # Brace at the end of the opening line


@dataclass(frozen=True)
class RenderOptions:
    brace_style: BraceStyle = BraceStyle.C
    blank_lines_between_members: bool = False
    indent: str = "    "


_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\0": "\\0",
    # C# also treats these as line terminators
    "\u0085": "\\u0085",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}

CSHARP_KEYWORDS = frozenset("""
    abstract as base bool break byte case catch char checked class const
    continue decimal default delegate do double else enum event explicit
    extern false finally fixed float for foreach goto if implicit in int
    interface internal is lock long namespace new null object operator out
    override params private protected public readonly ref return sbyte
    sealed short sizeof stackalloc static string struct switch this throw
    true try typeof uint ulong unchecked unsafe ushort using virtual void
    volatile while
""".split())


def _escape_csharp_string(s: str) -> str:
    """Quote and escape a string as a C# regular string literal."""
    return '"' + "".join(_ESCAPES.get(ch, ch) for ch in s) + '"'


def _csharp_identifier(name: str) -> str:
    """Prefix reserved words with '@' so they are usable as identifiers."""
    if is_valid_identifier(name) and name in CSHARP_KEYWORDS:
        return f"@{name}"
    return name


def _float_literal(value: float) -> str:
    if math.isnan(value):
        return "double.NaN"
    if math.isinf(value):
        return "double.PositiveInfinity" if value > 0 else "double.NegativeInfinity"
    text = repr(value)
    if "." not in text and "e" not in text:
        text += ".0"
    return text


def _expr_to_csharp(expr: Expression) -> str:
    """Render an annotation argument as a C# expression."""
    if isinstance(expr, Literal):
        value = expr.value
        # bool first: bool is an int subclass
        if isinstance(value, bool):
            return "true" if value else "false"
        if value is None:
            return "null"
        if isinstance(value, int):
            return str(value)
        if isinstance(value, float):
            return _float_literal(value)
        if isinstance(value, str):
            return _escape_csharp_string(value)
        raise TypeError(f"Unsupported literal value: {value!r}")

    elif isinstance(expr, ConstantReference):
        if expr.owner:
            return f"{_csharp_identifier(expr.owner)}.{_csharp_identifier(expr.name)}"
        return _csharp_identifier(expr.name)

    raise TypeError(f"Unsupported Expression type: {type(expr)}")


def _collect_imports(model: EnumModel) -> List[str]:
    """Annotation namespaces in first-seen order, without duplicates."""
    imports: List[str] = []
    for member in model.members:
        for annotation in member.annotations:
            ns = annotation.kind.namespace
            if ns and ns not in imports:
                imports.append(ns)
    return imports


def _open_block(lines: List[str], header: str, pad: str, options: RenderOptions) -> None:
    if options.brace_style == BraceStyle.BLOCK:
        lines.append(f"{pad}{header} {{")
    else:
        lines.append(f"{pad}{header}")
        lines.append(f"{pad}{{")


def _member_lines(member: MemberEntry, model: EnumModel, pad: str) -> List[str]:
    lines = []
    for annotation in member.annotations:
        argument = _expr_to_csharp(annotation.argument)
        lines.append(f"{pad}[{_csharp_identifier(annotation.kind.name)}({argument})]")
    name = _csharp_identifier(member.name)
    if member.has_explicit_value(model.no_value):
        lines.append(f"{pad}{name} = {member.value},")
    else:
        lines.append(f"{pad}{name},")
    return lines


def generate_csharp(model: EnumModel, options: Optional[RenderOptions] = None) -> str:
    """
    Generate C# source for an enum model.

    Args:
        model: EnumModel to render
        options: Formatting options (defaults to C brace style, no blank lines)

    Returns:
        String containing the full C# source file
    """
    if options is None:
        options = RenderOptions()

    lines: List[str] = []
    in_namespace = bool(model.namespace)
    depth = 1 if in_namespace else 0

    def pad(level: int) -> str:
        return options.indent * level

    # =========================================================================
    # NAMESPACE + IMPORTS
    # =========================================================================

    if in_namespace:
        _open_block(lines, f"namespace {model.namespace}", "", options)

    imports = _collect_imports(model)
    for ns in imports:
        lines.append(f"{pad(depth)}using {ns};")
    if imports:
        lines.append("")

    # =========================================================================
    # ENUM DECLARATION
    # =========================================================================

    _open_block(lines, f"public enum {_csharp_identifier(model.name)}", pad(depth), options)

    for index, member in enumerate(model.members):
        if index and options.blank_lines_between_members:
            lines.append("")
        lines.extend(_member_lines(member, model, pad(depth + 1)))

    lines.append(f"{pad(depth)}}}")

    if in_namespace:
        lines.append("}")

    return "\n".join(lines) + "\n"


def _write_text(filename: str, text: str) -> None:
    with open(filename, "w", encoding="utf-8") as f:
        f.write(text)


def save_csharp_file(
    model: EnumModel,
    filename: str,
    options: Optional[RenderOptions] = None,
    writer: Optional[Callable[[str, str], None]] = None,
) -> None:
    """
    Generate C# and save to file, overwriting any existing file.

    Args:
        model: EnumModel to render
        filename: Output file path (.cs extension recommended)
        options: Formatting options
        writer: Optional collaborator called as writer(filename, text)
    """
    source = generate_csharp(model, options=options)
    (writer or _write_text)(filename, source)
    logger.info("Wrote enum %s (%d members) to %s", model.name, len(model), filename)


__all__ = ["BraceStyle", "RenderOptions", "generate_csharp", "save_csharp_file"]
