from .logger import get_logger as get_logger
from .validators import parse_request as parse_request
from .validators import to_decimal as to_decimal
