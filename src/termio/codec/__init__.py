"""Declaration-language parsing."""

from termio.codec.tcss_parser import TcssParser

__all__ = ["TcssParser"]
