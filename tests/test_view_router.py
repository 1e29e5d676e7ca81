# tests/test_view_router.py

"""Tests for the ViewRouter page state machine."""

import unittest
from unittest.mock import MagicMock

from src.models.commands import Page
from src.models.view_state import ViewState
from src.services.view_router import ViewRouter


class TestViewRouter(unittest.TestCase):
    """Transitions and hooks."""

    def setUp(self) -> None:
        self.view = ViewState()
        self.router = ViewRouter(self.view)

    def test_initial_page_is_home(self) -> None:
        self.assertEqual(self.router.current, Page.HOME)

    def test_navigate_updates_view_state(self) -> None:
        self.router.navigate(Page.SELL)
        self.assertEqual(self.view.current_page, Page.SELL)

    def test_navigate_accepts_page_names(self) -> None:
        self.assertEqual(self.router.navigate("admin"), Page.ADMIN)

    def test_unknown_page_raises(self) -> None:
        with self.assertRaises(ValueError):
            self.router.navigate("checkout")
        self.assertEqual(self.router.current, Page.HOME)

    def test_transition_listener_gets_previous_and_target(self) -> None:
        listener = MagicMock()
        self.router.on_transition(listener)
        self.router.navigate(Page.BROWSE)
        self.router.navigate(Page.ADMIN)
        self.assertEqual(
            [c.args for c in listener.call_args_list],
            [(Page.HOME, Page.BROWSE), (Page.BROWSE, Page.ADMIN)],
        )

    def test_only_target_hooks_run(self) -> None:
        hooks = {page: MagicMock() for page in Page}
        for page, hook in hooks.items():
            self.router.on_enter(page, hook)

        self.router.navigate(Page.BROWSE)
        hooks[Page.BROWSE].assert_called_once_with()
        hooks[Page.ADMIN].assert_not_called()
        hooks[Page.SELL].assert_not_called()

        self.router.navigate(Page.SELL)
        hooks[Page.SELL].assert_called_once_with()

    def test_renavigating_reruns_hooks(self) -> None:
        hook = MagicMock()
        self.router.on_enter(Page.ADMIN, hook)
        self.router.navigate(Page.ADMIN)
        self.router.navigate(Page.ADMIN)
        self.assertEqual(hook.call_count, 2)

    def test_listeners_run_before_hooks(self) -> None:
        calls: list[str] = []
        self.router.on_transition(lambda _p, _t: calls.append("activate"))
        self.router.on_enter(Page.BROWSE, lambda: calls.append("render"))
        self.router.navigate(Page.BROWSE)
        self.assertEqual(calls, ["activate", "render"])


if __name__ == "__main__":
    unittest.main()
