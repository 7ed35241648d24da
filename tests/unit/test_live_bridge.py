"""
Tests for the live-page collector and message bridge.
"""

import json

import pytest
from boardscout.extractor import LiveDomPage
from boardscout.live import EXTRACT_ACTION, collect_snapshot, handle_message
from tests.helpers.pages import BOARD_URL, make_html


@pytest.mark.unit
class TestCollectSnapshot:
    @pytest.mark.asyncio
    async def test_snapshot(self, live_page_factory):
        props = [["board-title", {"__reactProps$x": {"board_id": "123123123"}}], ["body", {}]]
        page = live_page_factory(make_html(), framework_props=props)

        snapshot = await collect_snapshot(page)

        assert isinstance(snapshot, LiveDomPage)
        assert snapshot.url == BOARD_URL
        assert snapshot.framework_props == (
            ("board-title", {"__reactProps$x": {"board_id": "123123123"}}),
            ("body", {}),
        )
        anchors = page.evaluate.await_args.args[1][0]
        assert [name for name, _selector in anchors] == ["board-header", "board-title", "root-first-child", "body"]

    @pytest.mark.asyncio
    async def test_props_failure_leaves_html(self, live_page_factory):
        page = live_page_factory(make_html(), evaluate_error=RuntimeError("Execution context was destroyed"))
        snapshot = await collect_snapshot(page)
        assert snapshot.framework_props == ()
        assert "Recipes" in snapshot.html


@pytest.mark.unit
class TestHandleMessage:
    @pytest.mark.asyncio
    async def test_react_props_success(self, live_page_factory):
        props = [["board-header", {"__reactProps$x": {"data": {"board_id": "123123123"}}}]]
        page = live_page_factory(make_html(), framework_props=props)

        response = await handle_message({"action": EXTRACT_ACTION}, page)

        assert response["success"] is True
        assert response["id"] == "123123123"
        assert response["method"] == "ReactFiber"
        assert response["meta"]["url"] == BOARD_URL
        assert response["meta"]["title"] == "Recipes"
        json.dumps(response)

    @pytest.mark.asyncio
    async def test_deep_link_outranks_react_props(self, live_page_factory):
        html = make_html('<meta property="al:ios:url" content="pinterest://board/555555555">')
        props = [["board-header", {"__reactProps$x": {"board_id": "123123123"}}]]
        response = await handle_message({"action": EXTRACT_ACTION}, live_page_factory(html, framework_props=props))
        assert (response["id"], response["method"]) == ("555555555", "DeepLink")

    @pytest.mark.asyncio
    async def test_regex_not_used_on_live_pages(self, live_page_factory):
        html = make_html(body='<div data-board-id="565656565"></div>')
        response = await handle_message({"action": EXTRACT_ACTION}, live_page_factory(html))
        assert response["success"] is False
        assert response["meta"]["title"] == "Recipes"
        assert "board" in response["error"]

    @pytest.mark.asyncio
    async def test_not_a_board_page(self, live_page_factory):
        page = live_page_factory(make_html(), url="https://example.com/")
        response = await handle_message({"action": EXTRACT_ACTION}, page)
        assert response["success"] is False
        page.content.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_action_still_answered(self, live_page_factory):
        response = await handle_message({"action": "PING"}, live_page_factory(make_html()))
        assert response["success"] is False
        assert "PING" in response["error"]

    @pytest.mark.asyncio
    async def test_internal_failure_still_answered(self, live_page_factory):
        page = live_page_factory(make_html())
        page.content.side_effect = RuntimeError("Target closed")
        response = await handle_message({"action": EXTRACT_ACTION}, page)
        assert response["success"] is False
        assert response["id"] is None
        assert response["meta"]["url"] == BOARD_URL
