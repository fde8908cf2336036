"""
Expense parser bot.
Entry point with Flask server for the parse API and keep-alive.
"""

import asyncio
import logging
import threading
from flask import Flask, jsonify, request

from aiogram import Bot, Dispatcher

from src.config import config
from src.services import parser
from src.handlers import router
from src.handlers.messages import needs_review

# Logging
logging.basicConfig(
    level=logging.DEBUG if config.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

# Flask app: parse API + keep-alive
app = Flask(__name__)
app.json.ensure_ascii = False

@app.route("/")
def home():
    return "🤖 Expense parser is running!"

@app.route("/health")
def health():
    return {"status": "ok"}

@app.route("/parse", methods=["POST"])
def parse():
    """Parse one phrase into a pre-filled transaction."""
    data = request.get_json(silent=True)
    text = data.get("text") if isinstance(data, dict) else None
    if not isinstance(text, str):
        return jsonify({"error": "field 'text' (string) is required"}), 400

    parsed = parser.parse(text)
    result = parsed.to_dict()
    result["needs_review"] = needs_review(parsed)
    return jsonify(result)

def run_flask():
    """Run Flask in a separate thread."""
    app.run(host=config.WEB_HOST, port=config.WEB_PORT, debug=False, use_reloader=False)


async def main():
    """Main entry point."""
    # Validate config
    config.validate()

    logger.info("🚀 Starting expense parser bot...")

    # Start Flask server in background thread
    flask_thread = threading.Thread(target=run_flask, daemon=True)
    flask_thread.start()
    logger.info(f"✅ Web server started on port {config.WEB_PORT}")

    # Init bot
    bot = Bot(token=config.BOT_TOKEN)
    dp = Dispatcher()
    dp.include_router(router)

    logger.info("✅ Bot running! Ctrl+C to stop.")
    await dp.start_polling(bot)


if __name__ == "__main__":
    asyncio.run(main())
