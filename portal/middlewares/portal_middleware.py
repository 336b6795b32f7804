"""
Portal middleware.

Injects into every handler's data dict:
  client        — shared RegistrationServiceClient
  form          — this user's RegistrationForm (one per user, never shared)
  registrations — this user's lenient list view (registration page)
  host_view     — this user's strict list view (host dashboard)

A successful submission refreshes the same user's registration-page list.
"""
from typing import Any, Awaitable, Callable, Dict

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject

from portal.forms import RegistrationForm
from portal.listing import RegistrationListView
from portal.services import RegistrationServiceClient


class PortalMiddleware(BaseMiddleware):
    def __init__(self, client: RegistrationServiceClient) -> None:
        self._client = client
        # user_id → per-user state
        self._forms: Dict[int, RegistrationForm] = {}
        self._lists: Dict[int, RegistrationListView] = {}
        self._host_views: Dict[int, RegistrationListView] = {}

    def form_for(self, user_id: int) -> RegistrationForm:
        form = self._forms.get(user_id)
        if form is None:
            form = RegistrationForm(self._client)
            form.on_success(self.list_for(user_id).refresh)
            self._forms[user_id] = form
        return form

    def list_for(self, user_id: int) -> RegistrationListView:
        view = self._lists.get(user_id)
        if view is None:
            view = self._lists[user_id] = RegistrationListView(self._client, strict=False)
        return view

    def host_view_for(self, user_id: int) -> RegistrationListView:
        view = self._host_views.get(user_id)
        if view is None:
            view = self._host_views[user_id] = RegistrationListView(self._client, strict=True)
        return view

    async def __call__(
        self,
        handler: Callable[[TelegramObject, Dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: Dict[str, Any],
    ) -> Any:
        data["client"] = self._client
        user = data.get("event_from_user")
        if user is not None:
            data["form"] = self.form_for(user.id)
            data["registrations"] = self.list_for(user.id)
            data["host_view"] = self.host_view_for(user.id)
        return await handler(event, data)
