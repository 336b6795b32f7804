"""
Cricket Tournament Portal — Telegram front end for team registrations.
Entry point: creates the bot, registers routers + middleware, handles graceful shutdown.
"""
import asyncio
import logging
import signal
import sys

from aiogram import Bot, Dispatcher
from aiogram.client.default import DefaultBotProperties
from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramAPIError
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.types import ErrorEvent

from portal.config import settings
from portal.middlewares import PortalMiddleware
from portal.services import RegistrationServiceClient

# ── Handlers ──────────────────────────────────────────────────────────────────
from portal.handlers.common import router as common_router
from portal.handlers.registration import router as registration_router
from portal.handlers.host import router as host_router
from portal.handlers.fallback import router as fallback_router

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)


def build_dispatcher(client: RegistrationServiceClient) -> Dispatcher:
    dp = Dispatcher(storage=MemoryStorage())

    # ── Global error handler — ensures callbacks are always answered ──────────
    @dp.errors()
    async def handle_error(event: ErrorEvent) -> None:
        logger.exception("Unhandled error: %s", event.exception)
        update = event.update
        if update.callback_query:
            try:
                await update.callback_query.answer(
                    "⚠️ Something went wrong. Please try again.", show_alert=True
                )
            except TelegramAPIError:
                pass

    # ── Global middlewares ────────────────────────────────────────────────────
    dp.update.middleware(PortalMiddleware(client))

    # ── Routers — order matters for handler priority ──────────────────────────
    dp.include_router(common_router)
    dp.include_router(registration_router)
    dp.include_router(host_router)

    # !! Must be last — catches anything not handled above !!
    dp.include_router(fallback_router)

    return dp


async def main() -> None:
    logger.info("Starting portal bot (backend: %s)…", settings.api_base)

    client = RegistrationServiceClient(settings.api_base)
    bot = Bot(
        token=settings.BOT_TOKEN,
        default=DefaultBotProperties(parse_mode=ParseMode.HTML),
    )
    dp = build_dispatcher(client)

    # ── Graceful shutdown on SIGTERM (Docker / PaaS) ──────────────────────────
    loop = asyncio.get_running_loop()

    def _handle_signal() -> None:
        logger.info("Received shutdown signal, stopping…")
        asyncio.ensure_future(dp.stop_polling())

    for sig in (signal.SIGTERM, signal.SIGINT):
        try:
            loop.add_signal_handler(sig, _handle_signal)
        except NotImplementedError:
            # Windows does not support add_signal_handler
            pass

    try:
        logger.info("Bot is running. Press Ctrl+C to stop.")
        await dp.start_polling(
            bot,
            allowed_updates=dp.resolve_used_update_types(),
            handle_signals=False,
        )
    finally:
        logger.info("Shutting down…")
        await bot.session.close()
        await client.close()
        logger.info("Shutdown complete.")


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
