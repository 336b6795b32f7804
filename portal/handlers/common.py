"""
Common handlers: /start, main menu routing, backend connection check.
"""
import logging

from aiogram import F, Router
from aiogram.enums import ParseMode
from aiogram.filters import CommandStart
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message
from aiogram.utils.text_decorations import html_decoration as hd

from portal.keyboards import MainMenuCb, back_to_main, main_menu
from portal.services import RegistrationServiceClient

logger = logging.getLogger(__name__)
router = Router(name="common")


def _welcome_text(client: RegistrationServiceClient) -> str:
    return (
        "🏏 <b>Cricket Tournament Portal</b>\n\n"
        "• 📝 Register a team with 8 players and fees\n"
        "• 📋 View all registrations and total fees\n\n"
        f"Backend: <code>{hd.quote(client.base_url)}</code>\n\n"
        "Choose your path below:"
    )


# ── /start ────────────────────────────────────────────────────────────────────

@router.message(CommandStart())
async def cmd_start(message: Message, state: FSMContext, client: RegistrationServiceClient) -> None:
    await state.clear()
    await message.answer(
        _welcome_text(client),
        parse_mode=ParseMode.HTML,
        reply_markup=main_menu(),
    )


# ── Main menu callback ────────────────────────────────────────────────────────

@router.callback_query(MainMenuCb.filter(F.action == "main"))
async def cq_main_menu(
    callback: CallbackQuery,
    state: FSMContext,
    client: RegistrationServiceClient,
) -> None:
    await state.clear()
    await callback.message.edit_text(
        _welcome_text(client),
        parse_mode=ParseMode.HTML,
        reply_markup=main_menu(),
    )
    await callback.answer()


# ── Backend connection check ──────────────────────────────────────────────────

@router.callback_query(MainMenuCb.filter(F.action == "check"))
async def cq_check_backend(callback: CallbackQuery, client: RegistrationServiceClient) -> None:
    await callback.answer()
    report = await client.check_connection()
    if report.ok:
        text = f"✅ Backend is reachable (HTTP {report.status})."
    elif report.status:
        text = f"⚠️ Backend responded with HTTP {report.status}."
    else:
        text = f"❌ Backend unreachable: {hd.quote(report.detail)}"
    await callback.message.edit_text(
        f"🔌 <b>Backend connection</b>\n"
        f"<code>{hd.quote(client.base_url)}</code>\n\n{text}",
        parse_mode=ParseMode.HTML,
        reply_markup=back_to_main(),
    )


@router.callback_query(F.data == "noop")
async def cq_noop(callback: CallbackQuery) -> None:
    await callback.answer()
