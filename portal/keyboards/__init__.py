from portal.keyboards.callbacks import MainMenuCb, RegistrationCb, HostCb
from portal.keyboards.main_menu import main_menu, back_to_main
from portal.keyboards.registration_kb import step_kb, review_kb
from portal.keyboards.host_kb import host_dashboard_kb

__all__ = [
    # callbacks
    "MainMenuCb", "RegistrationCb", "HostCb",
    # main menu
    "main_menu", "back_to_main",
    # registration
    "step_kb", "review_kb",
    # host
    "host_dashboard_kb",
]
