"""
Keyboards for the team registration FSM flow.
"""
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from portal.keyboards.callbacks import MainMenuCb, RegistrationCb


def step_kb(can_keep: bool = False) -> InlineKeyboardMarkup:
    """Prompt keyboard; offers to keep the current value when the draft has one."""
    builder = InlineKeyboardBuilder()
    if can_keep:
        builder.row(InlineKeyboardButton(text="⏭ Keep current", callback_data=RegistrationCb(action="keep").pack()))
    builder.row(InlineKeyboardButton(text="❌ Cancel", callback_data=MainMenuCb(action="main").pack()))
    return builder.as_markup()


def review_kb() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.row(
        InlineKeyboardButton(text="✅ Submit registration", callback_data=RegistrationCb(action="submit").pack()),
    )
    builder.row(
        InlineKeyboardButton(text="✏️ Edit",   callback_data=RegistrationCb(action="edit").pack()),
        InlineKeyboardButton(text="❌ Cancel", callback_data=MainMenuCb(action="main").pack()),
    )
    return builder.as_markup()
