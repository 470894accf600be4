"""Regular expressions driven by JavaScript-style flag strings.

Workflow inputs carry flags as letters (``g``, ``i``, ``m``, ``s``). ``g``
selects replace-all / find-all instead of first match; the rest map onto
``re`` flags. ``u``, ``v`` and ``d`` are accepted and ignored: str patterns
are Unicode-aware already and match indices are never reported. Without
``s``, a dot matches anything but a line terminator (LF, CR, U+2028,
U+2029), so CRLF line endings stay outside a match.
"""

import re
from typing import List, Tuple

GLOBAL_FLAG = "g"
FLAG_BITS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
}
IGNORED_FLAGS = frozenset("uvd")
# Without s, a dot stops at every line terminator, not only \n
LINE_DOT = "[^\\n\\r\\u2028\\u2029]"


class PatternError(ValueError):
    """Raised for unknown flags or a pattern that does not compile."""

    pass


def parse_flags(flags: str) -> Tuple[bool, int]:
    """Return (is_global, re flag bits) for a flag string like ``"gi"``.

    Unknown or repeated letters raise PatternError.
    """
    seen: set[str] = set()
    bits = 0
    for letter in flags:
        if letter in seen or not (letter == GLOBAL_FLAG or letter in FLAG_BITS or letter in IGNORED_FLAGS):
            raise PatternError(f"Invalid flags supplied to RegExp constructor '{flags}'")
        seen.add(letter)
        bits |= FLAG_BITS.get(letter, 0)
    return GLOBAL_FLAG in seen, bits


def translate_dots(source: str) -> str:
    """Replace each unescaped `.` outside a character class with LINE_DOT."""
    out: list[str] = []
    in_class = False
    i = 0
    while i < len(source):
        char = source[i]
        if char == "\\":
            out.append(source[i : i + 2])
            i += 2
            continue
        if in_class:
            if char == "]":
                in_class = False
        elif char == "[":
            in_class = True
        elif char == ".":
            char = LINE_DOT
        out.append(char)
        i += 1
    return "".join(out)


class Pattern:
    """Compiled pattern plus its global flag."""

    def __init__(self, source: str, flags: str = "") -> None:
        self.source = source
        self.flags = flags
        self.is_global, bits = parse_flags(flags)
        try:
            self._regex = re.compile(source if bits & re.DOTALL else translate_dots(source), bits)
        except re.error as e:
            raise PatternError(f"Invalid regular expression: /{source}/: {e}") from e

    def __repr__(self) -> str:
        return f"Pattern(/{self.source}/{self.flags})"

    def test(self, text: str) -> bool:
        """True if the pattern matches anywhere in text."""
        return self._regex.search(text) is not None

    def replace(self, text: str, replacement: str) -> str:
        """Replace the first match (every match when global) with replacement.

        The replacement is literal: backslashes and group references in it
        are not expanded.
        """
        return self._regex.sub(lambda _m: replacement, text, count=0 if self.is_global else 1)

    def match_pieces(self, text: str) -> List[str] | None:
        """Return the pieces of a match, or None when nothing matches.

        Global: every full match in order. Otherwise: the first full match
        followed by each capture group, groups that did not take part as "".
        """
        if self.is_global:
            pieces = [m.group(0) for m in self._regex.finditer(text)]
            return pieces or None
        match = self._regex.search(text)
        if match is None:
            return None
        return [match.group(0), *match.groups(default="")]

    def extract(self, text: str) -> str | None:
        """Join the match pieces with no separator; None when nothing matches."""
        pieces = self.match_pieces(text)
        if pieces is None:
            return None
        return "".join(pieces)
