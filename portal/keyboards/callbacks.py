"""
Centralized CallbackData factories.
Telegram limits callback_data to 64 bytes — all prefixes are kept short.
"""
from aiogram.filters.callback_data import CallbackData


class MainMenuCb(CallbackData, prefix="mm"):
    action: str           # main | register | host | check


class RegistrationCb(CallbackData, prefix="reg"):
    action: str           # keep | submit | edit


class HostCb(CallbackData, prefix="host"):
    action: str           # refresh
