"""
Host dashboard: all registrations plus total fees collected.

Uses the strict list view, so a failed fetch is shown as an error
rather than as "No registrations yet."
"""
import logging

from aiogram import F, Router
from aiogram.enums import ParseMode
from aiogram.filters import Command
from aiogram.types import CallbackQuery, Message
from aiogram.utils.text_decorations import html_decoration as hd

from portal.keyboards import HostCb, MainMenuCb, host_dashboard_kb
from portal.listing import RegistrationListView
from portal.services import format_registrations_text

logger = logging.getLogger(__name__)
router = Router(name="host")

# Telegram rejects messages longer than 4096 characters
MAX_MESSAGE_LEN = 4000

LOADING_TEXT = "<b>📋 Host Dashboard</b>\n\n<i>Loading...</i>"


def _dashboard_text(view: RegistrationListView) -> str:
    if view.error:
        return f"<b>📋 Host Dashboard</b>\n\n⚠️ {hd.quote(view.error)}"
    text = "<b>📋 Host Dashboard</b>\n\n" + format_registrations_text(
        list(view.records), view.total_fees,
    )
    if len(text) > MAX_MESSAGE_LEN:
        text = text[:MAX_MESSAGE_LEN].rsplit("\n", 1)[0] + "\n…"
    return text


@router.message(Command("host"))
async def cmd_host(message: Message, host_view: RegistrationListView) -> None:
    sent = await message.answer(LOADING_TEXT, parse_mode=ParseMode.HTML)
    await host_view.refresh()
    await sent.edit_text(
        _dashboard_text(host_view),
        parse_mode=ParseMode.HTML,
        reply_markup=host_dashboard_kb(),
    )


@router.callback_query(MainMenuCb.filter(F.action == "host"))
@router.callback_query(HostCb.filter(F.action == "refresh"))
async def cq_host_dashboard(callback: CallbackQuery, host_view: RegistrationListView) -> None:
    await callback.answer()
    await callback.message.edit_text(LOADING_TEXT, parse_mode=ParseMode.HTML)
    await host_view.refresh()
    await callback.message.edit_text(
        _dashboard_text(host_view),
        parse_mode=ParseMode.HTML,
        reply_markup=host_dashboard_kb(),
    )
