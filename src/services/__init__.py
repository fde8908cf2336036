"""Services package."""

from .parser import parser, TransactionParser, parse_transaction_text

__all__ = ["parser", "TransactionParser", "parse_transaction_text"]
