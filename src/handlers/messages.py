"""
Telegram message handlers.
"""

import logging
from typing import Optional

from aiogram import Router, F
from aiogram.filters import Command
from aiogram.types import Message
from aiogram.enums import ParseMode

from ..config import config
from ..services import parser
from ..models import ParsedTransaction
from ..constants import VOICE_EXAMPLES
from ..utils import fmt

logger = logging.getLogger(__name__)
router = Router()


def needs_review(parsed: ParsedTransaction, threshold: Optional[int] = None) -> bool:
    """Low-confidence parses go back to the user instead of a confirmation."""
    if threshold is None:
        threshold = config.CONFIDENCE_THRESHOLD
    return parsed.confidence <= threshold


def fmt_parsed(parsed: ParsedTransaction) -> str:
    """Format a pre-filled confirmation."""
    if parsed.category:
        category_line = f"{parsed.category.icon} {parsed.category.name}"
    else:
        category_line = "❓ Chưa rõ danh mục"
    amount_line = f"💵 {fmt(parsed.amount)}đ" if parsed.amount > 0 else "💵 Chưa rõ số tiền"
    return (
        f"{category_line} | {amount_line}\n"
        f"📝 {parsed.description}\n"
        f"🏷️ {parsed.expense_type.value} · 🎯 {parsed.confidence}%"
    )


def build_reply(parsed: ParsedTransaction, raw_text: str, threshold: Optional[int] = None) -> str:
    """Reply text for a parsed message."""
    if needs_review(parsed, threshold):
        # A backtick inside the code span breaks Telegram's Markdown parsing
        shown = raw_text.replace("`", "'")
        return (
            "🤔 Không hiểu rõ tin nhắn:\n"
            f"`{shown}`\n\n"
            "Thử ghi rõ hơn, ví dụ: `ăn phở 45k`"
        )

    hints = []
    if parsed.amount <= 0:
        hints.append("⚠️ Thiếu số tiền")
    if parsed.category is None:
        hints.append("⚠️ Chọn danh mục")

    reply = f"📋 **Xác nhận giao dịch?**\n{fmt_parsed(parsed)}"
    if hints:
        reply += "\n" + "\n".join(hints)
    return reply


# ==================== Commands ====================

@router.message(Command("start", "help"))
async def cmd_help(message: Message):
    """Help command."""
    examples = " · ".join(f"`{ex}`" for ex in VOICE_EXAMPLES)
    await message.answer(
        "🤖 **Trợ lý chi tiêu**\n\n"
        f"**Ghi:** {examples}\n"
        "**Danh mục:** /categories",
        parse_mode=ParseMode.MARKDOWN
    )


@router.message(Command("categories"))
async def cmd_categories(message: Message):
    """List the category catalog."""
    lines = [f"{c.icon} {c.name} ({c.default_expense_type.value})" for c in parser.categories]
    await message.answer("📂 **Danh mục:**\n" + "\n".join(lines), parse_mode=ParseMode.MARKDOWN)


# ==================== Text Handler ====================

@router.message(F.text)
async def handle_text(message: Message):
    """Handle text messages."""
    user_id = message.from_user.id
    text = message.text.strip()

    try:
        parsed = parser.parse(text)
        logger.info(f"User {user_id}: confidence {parsed.confidence}")
    except Exception as e:
        logger.error(f"Parse error: {e}")
        await message.answer(
            "🤔 Không hiểu tin nhắn. Thử:\n"
            "• `ăn phở 45k` - ghi chi tiêu\n"
            "• `/help` - xem hướng dẫn",
            parse_mode=ParseMode.MARKDOWN
        )
        return

    await message.answer(build_reply(parsed, text), parse_mode=ParseMode.MARKDOWN)
