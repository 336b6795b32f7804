"""
Global fallback handlers — included LAST in the dispatcher.

Catches any callback query that no other router handled, e.g. stale
keyboards after a restart (MemoryStorage is wiped on redeploy).
"""
from aiogram import Router
from aiogram.enums import ParseMode
from aiogram.exceptions import TelegramBadRequest
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message

from portal.keyboards import main_menu

router = Router(name="fallback")


@router.callback_query()
async def cq_fallback(callback: CallbackQuery, state: FSMContext) -> None:
    await callback.answer("⚠️ This button has expired. Please start again.", show_alert=True)
    await state.clear()
    try:
        await callback.message.edit_text(
            "🔄 <b>Session reset.</b> Back to the main menu:",
            parse_mode=ParseMode.HTML,
            reply_markup=main_menu(),
        )
    except TelegramBadRequest:
        pass


@router.message()
async def msg_fallback(message: Message) -> None:
    await message.answer("Use /start to open the main menu.")
