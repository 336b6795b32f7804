"""
Team registration FSM handler.

Flow:
  Register → captain → contact → team → fees → player 1..8
           → review → submit ✅ / edit ✏️ / cancel

Every text input goes straight into the draft; nothing is validated until
the user submits from the review screen.
"""
import logging
from typing import Optional

from aiogram import F, Router
from aiogram.enums import ParseMode
from aiogram.fsm.context import FSMContext
from aiogram.types import CallbackQuery, Message
from aiogram.utils.text_decorations import html_decoration as hd

from portal.forms import Errored, RegistrationForm, Succeeded
from portal.keyboards import MainMenuCb, RegistrationCb, main_menu, review_kb, step_kb
from portal.listing import RegistrationListView
from portal.states import RegistrationStates
from portal.validators import ROSTER_SIZE, RegistrationDraft

logger = logging.getLogger(__name__)
router = Router(name="registration")

# (draft field, label, example)
DETAIL_STEPS = [
    ("captain_name",   "Captain name",       "Virat Kohli"),
    ("contact_number", "Contact number",     "+91 98765 43210"),
    ("team_name",      "Team name",          "Thunder Strikers"),
    ("fees_input",     "Registration fees ($)", "25.00"),
]
TOTAL_STEPS = len(DETAIL_STEPS) + ROSTER_SIZE


def _current_value(draft: RegistrationDraft, step: int) -> str:
    if step < len(DETAIL_STEPS):
        return getattr(draft, DETAIL_STEPS[step][0])
    return draft.players[step - len(DETAIL_STEPS)]


def _prompt_text(draft: RegistrationDraft, step: int) -> str:
    if step < len(DETAIL_STEPS):
        _, label, example = DETAIL_STEPS[step]
    else:
        idx = step - len(DETAIL_STEPS) + 1
        label, example = f"Player {idx} name", f"Player {idx}"

    text = f"📝 <b>Step {step + 1}/{TOTAL_STEPS}</b>\n\nEnter <b>{label}</b> (e.g., <i>{hd.quote(example)}</i>):"
    current = _current_value(draft, step)
    if current:
        text += f"\n\nCurrent: <code>{hd.quote(current)}</code>"
    return text


def _review_text(draft: RegistrationDraft, notice: Optional[str] = None) -> str:
    players = "\n".join(
        f"  {i}. {hd.quote(p) if p.strip() else '<i>(empty)</i>'}"
        for i, p in enumerate(draft.players, start=1)
    )
    text = (
        f"📋 <b>Review your registration</b>\n\n"
        f"👤 Captain: {hd.quote(draft.captain_name)}\n"
        f"📞 Contact: {hd.quote(draft.contact_number)}\n"
        f"🏏 Team: {hd.quote(draft.team_name)}\n"
        f"💵 Fees: {hd.quote(draft.fees_input)}\n"
        f"👥 Players ({draft.filled_players}/{ROSTER_SIZE}):\n{players}"
    )
    if notice:
        text = f"{notice}\n\n{text}"
    return text


async def _show_step(message: Message, state: FSMContext, form: RegistrationForm, step: int) -> None:
    """Send the prompt for ``step`` or the review screen once all steps are done."""
    if step >= TOTAL_STEPS:
        await state.set_state(RegistrationStates.review)
        await message.answer(
            _review_text(form.draft),
            parse_mode=ParseMode.HTML,
            reply_markup=review_kb(),
        )
        return

    target = (
        RegistrationStates.enter_details if step < len(DETAIL_STEPS)
        else RegistrationStates.enter_players
    )
    await state.set_state(target)
    await state.update_data(step=step)
    await message.answer(
        _prompt_text(form.draft, step),
        parse_mode=ParseMode.HTML,
        reply_markup=step_kb(can_keep=bool(_current_value(form.draft, step))),
    )


# ── Entry: "Register" button ──────────────────────────────────────────────────

@router.callback_query(MainMenuCb.filter(F.action == "register"))
async def cq_start_registration(
    callback: CallbackQuery,
    state: FSMContext,
    form: RegistrationForm,
    registrations: RegistrationListView,
) -> None:
    await callback.answer()
    # Failures are silent here: the registration page shows an empty list instead
    await registrations.refresh()
    await callback.message.edit_text(
        f"🏏 <b>Cricket Team Registration</b>\n\n"
        f"Register your squad of {ROSTER_SIZE} players for the tournament.\n"
        f"Teams registered so far: <b>{len(registrations.records)}</b>",
        parse_mode=ParseMode.HTML,
    )
    await _show_step(callback.message, state, form, 0)


# ── Text input: details and players ───────────────────────────────────────────

@router.message(RegistrationStates.enter_details, F.text)
async def msg_detail(message: Message, state: FSMContext, form: RegistrationForm) -> None:
    step = (await state.get_data()).get("step", 0)
    form.set_field(DETAIL_STEPS[step][0], message.text)
    await _show_step(message, state, form, step + 1)


@router.message(RegistrationStates.enter_players, F.text)
async def msg_player(message: Message, state: FSMContext, form: RegistrationForm) -> None:
    step = (await state.get_data()).get("step", len(DETAIL_STEPS))
    form.set_player(step - len(DETAIL_STEPS), message.text)
    await _show_step(message, state, form, step + 1)


@router.callback_query(
    RegistrationCb.filter(F.action == "keep"),
    RegistrationStates.enter_details,
)
@router.callback_query(
    RegistrationCb.filter(F.action == "keep"),
    RegistrationStates.enter_players,
)
async def cq_keep_value(callback: CallbackQuery, state: FSMContext, form: RegistrationForm) -> None:
    step = (await state.get_data()).get("step", 0)
    await callback.answer()
    await _show_step(callback.message, state, form, step + 1)


# ── Review: submit / edit ─────────────────────────────────────────────────────

@router.callback_query(RegistrationCb.filter(F.action == "submit"), RegistrationStates.review)
async def cq_submit(
    callback: CallbackQuery,
    state: FSMContext,
    form: RegistrationForm,
    registrations: RegistrationListView,
) -> None:
    if form.submitting:
        await callback.answer("⏳ Submitting...")
        return

    await callback.answer()
    # Drop the buttons while the request is in flight
    await callback.message.edit_text(
        _review_text(form.draft, notice="⏳ <b>Submitting...</b>"),
        parse_mode=ParseMode.HTML,
    )

    status = await form.submit()

    if isinstance(status, Succeeded):
        await state.clear()
        await callback.message.edit_text(
            f"🎉 <b>{hd.quote(status.message)}</b>\n\n"
            f"Teams registered so far: <b>{len(registrations.records)}</b>",
            parse_mode=ParseMode.HTML,
            reply_markup=main_menu(),
        )
    elif isinstance(status, Errored):
        await callback.message.edit_text(
            _review_text(form.draft, notice=f"⚠️ {hd.quote(status.message)}"),
            parse_mode=ParseMode.HTML,
            reply_markup=review_kb(),
        )


@router.callback_query(RegistrationCb.filter(F.action == "edit"), RegistrationStates.review)
async def cq_edit(callback: CallbackQuery, state: FSMContext, form: RegistrationForm) -> None:
    """Walk the prompts again; each one shows the current value."""
    await callback.answer()
    await _show_step(callback.message, state, form, 0)


@router.message(RegistrationStates.review)
async def msg_review_hint(message: Message) -> None:
    """Catch accidental text input on the review screen."""
    await message.answer(
        "👆 Please use the buttons to submit, edit or cancel:",
        reply_markup=review_kb(),
    )
