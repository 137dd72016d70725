import re
from dataclasses import dataclass

# CR LF, CR, LF, NEL and LINE SEPARATOR all end a line.
_LINE_END = re.compile("\r\n|\r|\n|\u0085|\u2028")
_BOM = "\ufeff"


@dataclass(frozen=True)
class Line:
    content: str
    number: int
    column: int = 1
    indent: str = ""

    @property
    def is_blank(self) -> bool:
        return self.content == ""

    def shifted(self, offset: int, content: str) -> "Line":
        """Return a line holding `content`, starting `offset` characters later."""
        return Line(
            content=content,
            number=self.number,
            column=self.column + offset,
            indent="",
        )


def split_lines(text: str) -> list[Line]:
    if text.startswith(_BOM):
        text = text[len(_BOM) :]
    if not text:
        return []

    raw_lines = _LINE_END.split(text)
    if raw_lines[-1] == "":
        # A trailing newline terminates the last line; it does not start one.
        raw_lines.pop()

    lines = []
    for number, raw in enumerate(raw_lines, start=1):
        stripped = raw.lstrip(" \t")
        indent = raw[: len(raw) - len(stripped)]
        lines.append(
            Line(
                content=stripped.rstrip(),
                number=number,
                column=len(indent) + 1,
                indent=indent,
            )
        )
    return lines
