"""Reference extraction — pull module specifiers out of JS/TS/Vue source.

Pure functions, no I/O. A lexical scan, not a parser: comments are blanked
first (string literals are respected so ``"http://x"`` survives), then four
patterns pick up the literal specifier of each supported form::

    import x from "m"            static-import
    import("m")                  dynamic-import
    require("m")                 module-load-call
    export { x } from "m"        re-export
    export * from "m"            re-export

Blanking keeps every character offset intact, so locations point into the
original text. A keyword inside a string literal, such as usage text, is not
a reference.
"""

from __future__ import annotations

import bisect
import re

from layerguard.domain.types import Location, Reference, ReferenceKind

# String literals (kept) or comments (blanked), whichever comes first.
_LEXEME = re.compile(
    r"""(?P<string>'(?:\\.|[^'\\\n])*'|"(?:\\.|[^"\\\n])*"|`(?:\\.|[^`\\])*`)"""
    r"""|(?P<line_comment>//[^\n]*)"""
    r"""|(?P<block_comment>/\*.*?\*/)""",
    re.DOTALL,
)

# A specifier literal. Template literals only count without interpolation.
_LITERAL = r"""(?P<quote>['"`])(?P<spec>(?:(?!\$\{)[^'"`\\\n])*)(?P=quote)"""

# Keywords must not be a member access or part of a longer identifier.
_START = r"(?<![\w$.])"

_PATTERNS: tuple[tuple[ReferenceKind, re.Pattern[str]], ...] = (
    (
        ReferenceKind.STATIC_IMPORT,
        re.compile(_START + r"import\s+(?:[\w$*{}\s,]+?\bfrom\s*)?" + _LITERAL),
    ),
    (
        ReferenceKind.DYNAMIC_IMPORT,
        re.compile(_START + r"import\s*\(\s*" + _LITERAL + r"\s*[,)]"),
    ),
    (
        ReferenceKind.MODULE_LOAD_CALL,
        re.compile(_START + r"require\s*\(\s*" + _LITERAL + r"\s*\)"),
    ),
    (
        ReferenceKind.RE_EXPORT,
        re.compile(
            _START
            + r"export\s+(?:type\s+)?(?:\*(?:\s+as\s+[\w$]+)?|\{[^}]*\})\s*from\s*"
            + _LITERAL
        ),
    ),
)

_SCRIPT_BLOCK = re.compile(r"(<script\b[^>]*>)(.*?)(</script\s*>)", re.DOTALL | re.IGNORECASE)


def blank_comments(source: str) -> str:
    """Replace comments with spaces, preserving newlines and offsets."""
    return _lex(source)[0]


def _lex(source: str) -> tuple[str, list[tuple[int, int]]]:
    """Blank comments and collect the ``(start, end)`` span of every string literal."""
    strings: list[tuple[int, int]] = []

    def _replace(match: re.Match[str]) -> str:
        if match.group("string") is not None:
            strings.append(match.span())
            return match.group(0)
        return re.sub(r"[^\n]", " ", match.group(0))

    return _LEXEME.sub(_replace, source), strings


def script_blocks_only(source: str) -> str:
    """Blank everything outside ``<script>`` blocks of a single-file component.

    Sources without any ``<script>`` tag are returned unchanged.
    """
    blocks = list(_SCRIPT_BLOCK.finditer(source))
    if not blocks:
        return source

    kept = [" " if ch != "\n" else "\n" for ch in source]
    for block in blocks:
        start, end = block.span(2)
        kept[start:end] = source[start:end]
    return "".join(kept)


def extract_references(source: str, *, single_file_component: bool = False) -> list[Reference]:
    """Extract all module references from *source*, in source order.

    Args:
        source: JavaScript, TypeScript, or Vue single-file-component text.
        single_file_component: Only scan ``<script>`` blocks.
    """
    text = script_blocks_only(source) if single_file_component else source
    text, strings = _lex(text)
    string_starts = [start for start, _ in strings]
    line_starts = _line_starts(text)

    found: list[tuple[int, Reference]] = []
    for kind, pattern in _PATTERNS:
        for match in pattern.finditer(text):
            if _inside_string(strings, string_starts, match.start()):
                continue
            offset = match.start("quote")
            found.append(
                (offset, Reference(match.group("spec"), kind, _locate(line_starts, offset)))
            )

    found.sort(key=lambda item: item[0])
    return [ref for _, ref in found]


def _line_starts(text: str) -> list[int]:
    starts = [0]
    starts.extend(m.end() for m in re.finditer("\n", text))
    return starts


def _locate(line_starts: list[int], offset: int) -> Location:
    index = bisect.bisect_right(line_starts, offset) - 1
    return Location(line=index + 1, column=offset - line_starts[index])


def _inside_string(strings: list[tuple[int, int]], starts: list[int], offset: int) -> bool:
    """True when *offset* falls inside a string literal (past its opening quote)."""
    index = bisect.bisect_right(starts, offset) - 1
    return index >= 0 and strings[index][0] < offset < strings[index][1]
