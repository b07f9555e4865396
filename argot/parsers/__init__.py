"""
Parsers turning raw cli tokens into values for declared parameters
"""
from ._interface import ArgParser_p, ParseIssue, ParseResult
from .parser import ArgParser
