"""
Telegram Bot — the user-facing interface.

Every chat gets its own WeatherOrchestrator; sending a city name (or
/weather <city>) runs one query cycle and replies with the result.
Also serves the web search page.

Usage:
  python bot.py
"""

import logging
import threading

from telegram import Update
from telegram.ext import (
    ApplicationBuilder,
    CommandHandler,
    MessageHandler,
    filters,
    ContextTypes,
)

from config import TELEGRAM_BOT_TOKEN, OWNER_CHAT_ID, LOG_LEVEL
from formatting import IDLE_PROMPT, format_state
from orchestrator import WeatherOrchestrator

logging.basicConfig(
    format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
    level=LOG_LEVEL,
)
logging.getLogger("httpx").setLevel(logging.WARNING)
log = logging.getLogger("bot")


# ── Auth ────────────────────────────────────────────────────────

def owner_only(func):
    """Restrict to OWNER_CHAT_ID. Set to 0 in .env to allow everyone."""
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE):
        if OWNER_CHAT_ID and update.effective_chat.id != OWNER_CHAT_ID:
            await update.message.reply_text("Not authorized.")
            return
        return await func(update, context)
    return wrapper


def get_orchestrator(context: ContextTypes.DEFAULT_TYPE) -> WeatherOrchestrator:
    """The chat's orchestrator, created on first use."""
    orchestrator = context.chat_data.get("orchestrator")
    if orchestrator is None:
        orchestrator = WeatherOrchestrator()
        context.chat_data["orchestrator"] = orchestrator
    return orchestrator


async def run_query(update: Update, context: ContextTypes.DEFAULT_TYPE, city: str):
    """Reply with a loading note, then replace it with the outcome."""
    orchestrator = get_orchestrator(context)
    pending = await update.message.reply_text(f"Looking up {city.strip() or '...'}")
    state = await orchestrator.submit(city)
    if orchestrator.state is not state:
        # A newer query in this chat owns the reply now
        await pending.delete()
        return
    await pending.edit_text(format_state(state))


# ── Command handlers ────────────────────────────────────────────

@owner_only
async def cmd_start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        "Weather bot online. Commands:\n\n"
        "/weather <city>  — current weather and 7-day forecast\n"
        "/clear  — forget the last result\n"
        "/help  — show this message\n\n"
        "Or just send a city name."
    )


@owner_only
async def cmd_help(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await cmd_start(update, context)


@owner_only
async def cmd_weather(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await run_query(update, context, " ".join(context.args or []))


@owner_only
async def cmd_clear(update: Update, context: ContextTypes.DEFAULT_TYPE):
    get_orchestrator(context).reset()
    await update.message.reply_text(IDLE_PROMPT)


@owner_only
async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Treat plain text as a city name."""
    text = update.message.text
    if not text:
        return
    await run_query(update, context, text)


# ── Main ────────────────────────────────────────────────────────

def start_dashboard_in_thread():
    """Run the Flask search page in a background thread."""
    try:
        from dashboard import create_app
        app = create_app()
        # Suppress Flask request logs in the main console
        flask_log = logging.getLogger("werkzeug")
        flask_log.setLevel(logging.WARNING)
        from config import DASHBOARD_HOST, DASHBOARD_PORT
        log.info(f"Web page: http://{DASHBOARD_HOST}:{DASHBOARD_PORT}")
        app.run(host=DASHBOARD_HOST, port=DASHBOARD_PORT, use_reloader=False)
    except Exception as e:
        log.error(f"Web page failed to start: {e}")


def main():
    if not TELEGRAM_BOT_TOKEN:
        raise SystemExit("TELEGRAM_BOT_TOKEN is not set (see .env)")

    dash_thread = threading.Thread(target=start_dashboard_in_thread, daemon=True)
    dash_thread.start()

    app = ApplicationBuilder().token(TELEGRAM_BOT_TOKEN).concurrent_updates(True).build()

    app.add_handler(CommandHandler("start", cmd_start))
    app.add_handler(CommandHandler("help", cmd_help))
    app.add_handler(CommandHandler("weather", cmd_weather))
    app.add_handler(CommandHandler("clear", cmd_clear))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))

    log.info("Bot starting (Telegram polling)...")
    app.run_polling()


if __name__ == "__main__":
    main()
