import logging

from array_ import MAX_CAPACITY
from errors import InvalidArgumentError
from heap_ import DEFAULT_CAPACITY, Heap
from logger import configure, get_logger
from utils import reverse_compare

INPUT_FILENAME = "heap_input.txt"
ORDERS = ("max", "min")

logger = get_logger("params")


class HeapParams:
    def __init__(self):
        self.initial_capacity = DEFAULT_CAPACITY
        self.max_capacity = MAX_CAPACITY
        self.delimiter = " "
        self.log_level = "WARNING"
        self.order = "max"


def _parse_int(parameter, value):
    try:
        return int(value)
    except ValueError as err:
        raise InvalidArgumentError(f"{parameter} must be an integer, got {value!r}") from err


def read_input(params, filename=INPUT_FILENAME):
    """
    Reads `key = value` lines into params. Blank lines and lines starting with # are skipped.
    A missing file keeps the defaults.
    """
    try:
        with open(filename, "r") as input_file:
            for line_number, line in enumerate(input_file, start=1):
                line = line.strip()
                if not line or line.startswith("#"):
                    continue
                if "=" not in line:
                    raise InvalidArgumentError(f"{filename}:{line_number}: expected key = value")
                parameter, value = line.split("=", 1)
                parameter = parameter.strip()
                value = value.strip()

                if parameter == "initial_capacity":
                    params.initial_capacity = _parse_int(parameter, value)
                elif parameter == "max_capacity":
                    params.max_capacity = _parse_int(parameter, value)
                elif parameter == "delimiter":
                    # quotes keep surrounding whitespace
                    params.delimiter = value[1:-1] if len(value) >= 2 and value[0] == value[-1] == '"' else value
                elif parameter == "log_level":
                    if not isinstance(logging.getLevelName(value.upper()), int):
                        raise InvalidArgumentError(f"unknown log level {value!r}")
                    params.log_level = value.upper()
                elif parameter == "order":
                    if value not in ORDERS:
                        raise InvalidArgumentError(f"order must be one of {ORDERS}, got {value!r}")
                    params.order = value
                else:
                    raise InvalidArgumentError(f"Unknown parameter {parameter}")
    except FileNotFoundError:
        logger.warning("cannot open file <%s>, using default parameters", filename)
    return params


def configure_logging(params):
    # For entry points; new_heap leaves logging alone
    return configure(params.log_level)


def new_heap(params, compare=None):
    if params.order == "min":
        compare = reverse_compare(compare)
    heap = Heap(params.initial_capacity, compare=compare, max_capacity=params.max_capacity,
                delimiter=params.delimiter)
    logger.info("created %s-heap with capacity %i", params.order, params.initial_capacity)
    return heap
