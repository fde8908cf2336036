"""
Rule-based parser for Vietnamese transaction phrases.

Turns text such as "ăn phở 45k" into a ParsedTransaction. Each stage is a
plain function so it can be exercised alone; TransactionParser binds them
to one catalog and keyword configuration.
"""

import logging
import re
import unicodedata
from decimal import Decimal
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

from ..constants import (
    AMOUNT_SUFFIXES, CATEGORY_KEYWORDS, DEFAULT_CATEGORIES, DEFAULT_DESCRIPTION,
    EXPENSE_TYPE_KEYWORDS, MAX_AMOUNT, STOP_WORDS, ExpenseType
)
from ..models import AmountMatch, Category, CategoryMatch, ParsedTransaction
from ..utils import fmt_vnd

logger = logging.getLogger(__name__)

# Number with optional decimal part, then an optional suffix that is not
# the start of a longer word ("25 kẹo" has no suffix)
AMOUNT_PATTERN = re.compile(
    r"([0-9]+(?:\.[0-9]+)?)\s*(?:(" + "|".join(map(re.escape, AMOUNT_SUFFIXES)) + r")(?!\w))?",
    re.IGNORECASE
)

STOP_WORDS_PATTERN = re.compile(
    r"\b(?:" + "|".join(map(re.escape, STOP_WORDS)) + r")\b",
    re.IGNORECASE
)

# Confidence weights
AMOUNT_WEIGHT = 30
CATEGORY_WEIGHT = 40
EXPENSE_TYPE_WEIGHT = 10
DESCRIPTION_WEIGHT = 20


def normalize_text(text: Optional[str]) -> str:
    """NFC-normalize, lowercase and trim. None becomes an empty string."""
    if text is None:
        return ""
    return unicodedata.normalize("NFC", str(text)).lower().strip()


# ==================== Amount ====================

def extract_amount(text: str) -> AmountMatch:
    """Return the largest plausible amount in the text."""
    best = 0

    for match in AMOUNT_PATTERN.finditer(text):
        number, suffix = match.group(1), match.group(2)
        multiplier = AMOUNT_SUFFIXES.get(suffix.lower(), 1) if suffix else 1

        value = Decimal(number) * multiplier

        # Stay in Decimal until the ceiling check; huge digit runs never become ints
        if value >= MAX_AMOUNT:
            logger.debug("Skipping implausible amount: %s", number[:20])
            continue

        best = max(best, int(value))

    return AmountMatch(amount=best, matched=best > 0)


# ==================== Category ====================

def match_category(
    text: str,
    keyword_table: Mapping[str, Sequence[str]],
    categories: Sequence[Category]
) -> CategoryMatch:
    """Score every category by the total length of its keywords found in text."""
    haystack = text.lower()
    best_name = None
    best_score = 0

    for name, keywords in keyword_table.items():
        score = sum(len(kw) for kw in keywords if kw.lower() in haystack)
        if score > best_score:
            best_name, best_score = name, score

    if best_name is None:
        return CategoryMatch()

    category = next((c for c in categories if c.name == best_name), None)
    if category is None:
        logger.warning(f"Keyword table names unknown category '{best_name}'")
        return CategoryMatch(score=best_score)

    return CategoryMatch(category=category, score=best_score)


# ==================== Expense type ====================

def classify_expense_type(
    text: str,
    type_keywords: Mapping[ExpenseType, Sequence[str]]
) -> Optional[ExpenseType]:
    """First expense type (in enum order) with a keyword in the text."""
    haystack = text.lower()
    for expense_type in ExpenseType:
        for kw in type_keywords.get(expense_type, ()):
            if kw.lower() in haystack:
                return expense_type
    return None


# ==================== Description ====================

def clean_description(
    text: str,
    amount: int,
    category: Optional[Category],
    keyword_table: Mapping[str, Sequence[str]] = CATEGORY_KEYWORDS
) -> str:
    """Strip amount, category keywords and filler words; never empty."""
    cleaned = AMOUNT_PATTERN.sub(" ", text)

    if category is not None:
        # Longest first so "cơm trưa" goes before "cơm"
        keywords = sorted(keyword_table.get(category.name, ()), key=len, reverse=True)
        for kw in keywords:
            cleaned = re.sub(re.escape(kw), " ", cleaned, flags=re.IGNORECASE)

    cleaned = STOP_WORDS_PATTERN.sub(" ", cleaned)
    cleaned = " ".join(cleaned.split()).strip(" ,.;:-")

    if cleaned:
        return cleaned
    if category is not None:
        return f"{category.name} {fmt_vnd(amount)}"
    return DEFAULT_DESCRIPTION


# ==================== Confidence ====================

def score_confidence(
    amount_found: bool,
    category_found: bool,
    type_found: bool,
    description_found: bool
) -> int:
    """Weighted sum of recovered parts, clamped to 0..100."""
    total = 0
    if amount_found:
        total += AMOUNT_WEIGHT
    if category_found:
        total += CATEGORY_WEIGHT
    if type_found:
        total += EXPENSE_TYPE_WEIGHT
    if description_found:
        total += DESCRIPTION_WEIGHT
    return max(0, min(total, 100))


# ==================== Parser ====================

class TransactionParser:
    """Parser bound to one category catalog and keyword configuration."""

    def __init__(
        self,
        categories: Iterable[Category],
        keyword_table: Mapping[str, Iterable[str]],
        type_keywords: Mapping[ExpenseType, Iterable[str]]
    ):
        self.categories = tuple(categories)
        self.keyword_table = MappingProxyType({
            name: tuple(normalize_text(kw) for kw in keywords)
            for name, keywords in keyword_table.items()
        })
        self.type_keywords = MappingProxyType({
            expense_type: tuple(normalize_text(kw) for kw in keywords)
            for expense_type, keywords in type_keywords.items()
        })

        self._check_catalog()
        logger.debug(
            f"TransactionParser initialized: {len(self.categories)} categories, "
            f"{len(self.keyword_table)} keyword sets"
        )

    def _check_catalog(self) -> None:
        """Warn about keyword sets without a catalog entry and duplicate names."""
        names: List[str] = [c.name for c in self.categories]
        for name in self.keyword_table:
            if name not in names:
                logger.warning(f"Keyword table entry '{name}' has no catalog category")

        seen: Dict[str, int] = {}
        for name in names:
            seen[name] = seen.get(name, 0) + 1
        for name, count in seen.items():
            if count > 1:
                logger.warning(f"Category name '{name}' appears {count} times in catalog")

    def parse(self, text: Optional[str]) -> ParsedTransaction:
        """Parse free text into a transaction."""
        original = normalize_text(text)
        logger.debug(f"Parsing input: {original!r}")

        amount_match = extract_amount(original)
        category_match = match_category(original, self.keyword_table, self.categories)
        expense_type = classify_expense_type(original, self.type_keywords)
        category = category_match.category

        if amount_match.matched:
            logger.debug(f"Extracted amount: {amount_match.amount}")
        if category is not None:
            logger.debug(f"Detected category: {category.name} (score {category_match.score})")

        # Nothing recognizable: keep the placeholder, no confidence.
        # A matched expense type is still returned but earns no +10 here.
        if not amount_match.matched and category is None:
            return ParsedTransaction(
                amount=0,
                category=None,
                description=DEFAULT_DESCRIPTION,
                expense_type=expense_type or ExpenseType.REQUIRED,
                confidence=0
            )

        description = clean_description(original, amount_match.amount, category, self.keyword_table)
        confidence = score_confidence(
            amount_found=amount_match.matched,
            category_found=category is not None,
            type_found=expense_type is not None,
            description_found=description != DEFAULT_DESCRIPTION
        )

        return ParsedTransaction(
            amount=amount_match.amount,
            category=category,
            description=description,
            expense_type=expense_type or ExpenseType.REQUIRED,
            confidence=confidence
        )


def default_categories() -> List[Category]:
    """Bundled catalog."""
    return [Category.from_row(row) for row in DEFAULT_CATEGORIES]


# Singleton
parser = TransactionParser(default_categories(), CATEGORY_KEYWORDS, EXPENSE_TYPE_KEYWORDS)


def parse_transaction_text(text: Optional[str]) -> ParsedTransaction:
    """Parse text with the bundled catalog."""
    return parser.parse(text)
