"""
Fills a source file template (e.g. a C++ header) with the angle database.

Template keys:
    $(file)            output file name
    $(array_name)      name of the generated array
    $(num_elements)    number of rows
    $(array_elements)  "{row},\\n{row},\\n...{row}"
"""

from __future__ import annotations
from typing import List, Sequence, Tuple


def list_to_array_format(rows: Sequence[str]) -> str:
    """Wrap each row in braces, one per line, comma separated."""
    return ",\n".join("{" + row + "}" for row in rows)


class TemplateFiller:
    def __init__(self):
        self._pairs: List[Tuple[str, str]] = []

    def add_key(self, key: str, value: str) -> None:
        self._pairs.append((key, value))

    def replace_variables(self, lines: Sequence[str]) -> List[str]:
        """Replace every key in every line, keys applied in the order added."""
        out = []
        for line in lines:
            for key, value in self._pairs:
                line = line.replace(key, value)
            out.append(line)
        return out


def fill_database_template(
    template_lines: Sequence[str], rows: Sequence[str], output_name: str, array_name: str
) -> List[str]:
    fill = TemplateFiller()
    fill.add_key("$(file)", output_name)
    fill.add_key("$(array_name)", array_name)
    fill.add_key("$(num_elements)", str(len(rows)))
    fill.add_key("$(array_elements)", list_to_array_format(rows))
    return fill.replace_variables(template_lines)
