"""
Reporters render declarations and errors as text
"""
from ._interface import TextSink_p, UsagePrinter_p
from .usage import UsagePrinter
