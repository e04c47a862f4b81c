"""Telegram polling state"""

# Global state for the polling loop
telegram_last_update_id = 0
telegram_polling_task = None
telegram_bot_running = False
