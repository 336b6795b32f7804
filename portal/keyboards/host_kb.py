"""
Host dashboard keyboards.
"""
from aiogram.types import InlineKeyboardButton, InlineKeyboardMarkup
from aiogram.utils.keyboard import InlineKeyboardBuilder

from portal.keyboards.callbacks import HostCb, MainMenuCb


def host_dashboard_kb() -> InlineKeyboardMarkup:
    builder = InlineKeyboardBuilder()
    builder.row(
        InlineKeyboardButton(text="🔄 Refresh",         callback_data=HostCb(action="refresh").pack()),
        InlineKeyboardButton(text="🏏 Registration page", callback_data=MainMenuCb(action="register").pack()),
    )
    builder.row(InlineKeyboardButton(text="🔙 Main menu", callback_data=MainMenuCb(action="main").pack()))
    return builder.as_markup()
