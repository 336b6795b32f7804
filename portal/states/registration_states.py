from aiogram.fsm.state import State, StatesGroup


class RegistrationStates(StatesGroup):
    """FSM for team registration flow."""
    enter_details = State()   # Text input: captain, contact, team, fees
    enter_players = State()   # Text input: player 1..8
    review        = State()   # Show draft → submit / edit / cancel
