from .csv_io import (
    read_lines,
    write_lines,
    write_database,
    read_database,
    DATABASE_HEADER,
    DatabaseFormatError,
)
from .template import (
    TemplateFiller,
    list_to_array_format,
    fill_database_template,
)

__all__ = [
    "read_lines",
    "write_lines",
    "write_database",
    "read_database",
    "DATABASE_HEADER",
    "DatabaseFormatError",
    "TemplateFiller",
    "list_to_array_format",
    "fill_database_template",
]
