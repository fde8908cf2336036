"""
Constants and Enums for the transaction parser.
"""

from enum import Enum
from typing import Dict, List


class ExpenseType(str, Enum):
    """Expense type enum. Declaration order is the classifier's scan order."""
    REQUIRED = "phải chi"
    INCIDENTAL = "phát sinh"
    WASTEFUL = "lãng phí"


# Placeholder description when nothing better is known
DEFAULT_DESCRIPTION = "Giao dịch"

CURRENCY_SIGN = "₫"

# Amounts at or above this are treated as mis-recognized numbers
MAX_AMOUNT = 10_000_000

# Magnitude / currency suffix -> multiplier
AMOUNT_SUFFIXES: Dict[str, int] = {
    "k": 1000,
    "nghìn": 1000,
    "ngàn": 1000,
    "đồng": 1,
    "dong": 1,
}

# Filler words removed from the description (whole words only)
STOP_WORDS: List[str] = ["mua", "chi", "trả", "tiền", "đồng", "vnd"]

# Default catalog: (id, name, icon, default expense type)
DEFAULT_CATEGORIES: List[tuple] = [
    ("1", "Cà phê", "☕", ExpenseType.REQUIRED),
    ("2", "Thực phẩm", "🍜", ExpenseType.REQUIRED),
    ("3", "Đi lại", "🛵", ExpenseType.REQUIRED),
    ("4", "Tạp hoá", "🛒", ExpenseType.REQUIRED),
    ("5", "Giải trí", "🎬", ExpenseType.WASTEFUL),
    ("6", "Sức khoẻ", "💊", ExpenseType.REQUIRED),
    ("7", "Tiền nhà", "🏠", ExpenseType.REQUIRED),
    ("8", "Thời trang", "👕", ExpenseType.INCIDENTAL),
    ("9", "Quà vặt", "🍬", ExpenseType.INCIDENTAL),
    ("10", "Khác", "➕", ExpenseType.INCIDENTAL),
]

# Keywords per category - order matters, ties go to the first entry
CATEGORY_KEYWORDS: Dict[str, List[str]] = {
    "Cà phê": ["cà phê", "cafe", "coffee", "caphe", "cà-phê", "tra sua", "trà sữa", "nước uống"],
    "Thực phẩm": [
        "ăn", "phở", "pho", "cơm", "bún", "bánh", "thức ăn", "đồ ăn", "ăn uống",
        "cơm trưa", "cơm tối", "sáng", "trưa", "tối", "food", "rice", "noodle",
    ],
    "Đi lại": ["taxi", "grab", "xe om", "xe ôm", "bus", "xe bus", "xăng", "di chuyển", "đi lại", "xe", "đi", "về"],
    "Tạp hoá": ["mua", "shopping", "siêu thị", "chợ", "cửa hàng", "mua sắm", "shop", "tạp hoá", "tạp hóa"],
    "Giải trí": ["xem phim", "phim", "karaoke", "bar", "club", "giải trí", "vui chơi", "movie"],
    "Sức khoẻ": ["thuốc", "bệnh viện", "khám", "y tế", "sức khỏe", "sức khoẻ", "doctor", "medicine"],
    "Tiền nhà": ["điện", "nước", "internet", "nhà", "thuê nhà", "tiền nhà", "house", "rent"],
    "Thời trang": ["quần áo", "giày", "thời trang", "áo", "quần", "fashion"],
    "Quà vặt": ["snack", "kẹo", "bánh kẹo", "quà vặt", "ăn vặt"],
}

# Keywords per expense type - first match wins
EXPENSE_TYPE_KEYWORDS: Dict[ExpenseType, List[str]] = {
    ExpenseType.REQUIRED: ["cần thiết", "quan trọng", "phải có", "thiết yếu", "phải chi"],
    ExpenseType.INCIDENTAL: ["phát sinh", "đột xuất", "bất ngờ", "tự nhiên phải", "lỡ tay"],
    ExpenseType.WASTEFUL: ["lãng phí", "phí phạm", "hoang phí", "vui chơi", "thích", "muốn"],
}

# Sample phrases shown in help
VOICE_EXAMPLES: List[str] = [
    "mua cà phê 25 nghìn",
    "ăn phở 45k",
    "đi taxi 80 nghìn đồng",
    "mua sắm siêu thị 150k",
    "xem phim 120 nghìn",
]
