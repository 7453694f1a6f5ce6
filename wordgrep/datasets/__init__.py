from .validator import validate_freq_file, pretty_summary
from .io import iter_lines, read_lines, write_lines
from .freq_file import read_frequency_file, write_frequency_file

__all__ = [
    "validate_freq_file",
    "pretty_summary",
    "iter_lines",
    "read_lines",
    "write_lines",
    "read_frequency_file",
    "write_frequency_file",
]
