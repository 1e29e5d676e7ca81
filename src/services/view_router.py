# src/services/view_router.py

"""Page navigation state machine."""

import logging
from collections.abc import Callable

from src.models.commands import Page
from src.models.view_state import ViewState

logger = logging.getLogger("bazaar.router")

TransitionListener = Callable[[Page, Page], None]
EnterHook = Callable[[], None]


class ViewRouter:
    """Track the active page and run page hooks on every transition.

    Transition listeners receive ``(previous, target)`` and are expected
    to deactivate the previous page and show the target one. Enter hooks
    then run for the target page only (browse and admin re-render, sell
    resets its form). Navigating to the active page runs them again.
    """

    def __init__(self, view: ViewState) -> None:
        self.view = view
        self._transition_listeners: list[TransitionListener] = []
        self._enter_hooks: dict[Page, list[EnterHook]] = {
            page: [] for page in Page
        }

    @property
    def current(self) -> Page:
        return self.view.current_page

    def on_transition(self, listener: TransitionListener) -> None:
        self._transition_listeners.append(listener)

    def on_enter(self, page: Page, hook: EnterHook) -> None:
        self._enter_hooks[page].append(hook)

    def navigate(self, page: Page | str) -> Page:
        """Make *page* the active page and run its hooks."""
        target = Page.parse(page)
        previous = self.view.current_page
        self.view.current_page = target
        logger.info("Navigate %s -> %s", previous.value, target.value)

        for listener in self._transition_listeners:
            listener(previous, target)
        for hook in self._enter_hooks[target]:
            hook()
        return target
