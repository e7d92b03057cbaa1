from .reader import BufferedInput, EmptyInputError, InputOutputError, count_lines, load_input
from .writer import OutputBuffer, OutputWriteError

__all__ = [
    "BufferedInput",
    "EmptyInputError",
    "InputOutputError",
    "OutputBuffer",
    "OutputWriteError",
    "count_lines",
    "load_input",
]
