from .engine import Parser
from .main import parse, parse_source

__all__ = ["Parser", "parse", "parse_source"]
