"""
Unit tests for the individual board-ID strategies.
"""

import json

import pytest
from boardscout.extractor import (
    BroadRegexStrategy,
    DeepLinkStrategy,
    HtmlPage,
    HydrationStateStrategy,
    JsonLdStrategy,
    LiveDomPage,
    ReactPropsStrategy,
    RegexStrategy,
)

from tests.helpers.pages import BOARD_URL, make_html


def html_page(head: str = "", body: str = "") -> HtmlPage:
    return HtmlPage(url=BOARD_URL, html=make_html(head, body))


def ld_json(payload) -> str:
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return f'<script type="application/ld+json">{text}</script>'


def pws_data(payload) -> str:
    text = payload if isinstance(payload, str) else json.dumps(payload)
    return f'<script id="__PWS_DATA__" type="application/json">{text}</script>'


class TestDeepLinkStrategy:
    strategy = DeepLinkStrategy()

    def test_ios_meta_tag(self):
        page = html_page('<meta property="al:ios:url" content="pinterest://board/123456789">')
        assert self.strategy.attempt(page, min_length=6) == "123456789"

    def test_android_meta_tag(self):
        page = html_page('<meta name="al:android:url" content="pinterest://board/987654321/">')
        assert self.strategy.attempt(page, min_length=6) == "987654321"

    def test_raw_text_deep_link(self):
        page = html_page(body='<script>var next = "PINTEREST://board/555555555";</script>')
        assert self.strategy.attempt(page, min_length=6) == "555555555"

    def test_short_id_rejected(self):
        page = html_page('<meta property="al:ios:url" content="pinterest://board/123">')
        assert self.strategy.attempt(page, min_length=6) is None

    def test_non_board_app_link(self):
        page = html_page('<meta property="al:ios:url" content="pinterest://pin/123456789">')
        assert self.strategy.attempt(page, min_length=6) is None


class TestJsonLdStrategy:
    strategy = JsonLdStrategy()

    def test_collection_page_main_entity(self):
        page = html_page(ld_json({"@type": "CollectionPage", "mainEntity": {"identifier": "987654321"}}))
        assert self.strategy.attempt(page, min_length=6) == "987654321"

    def test_top_level_identifier(self):
        page = html_page(ld_json({"@type": "WebPage", "identifier": 123456789}))
        assert self.strategy.attempt(page, min_length=6) == "123456789"

    def test_invalid_main_entity_falls_through_to_identifier(self):
        payload = {"@type": "CollectionPage", "mainEntity": {"identifier": "n/a"}, "identifier": "123456789"}
        assert self.strategy.attempt(html_page(ld_json(payload)), min_length=6) == "123456789"

    def test_malformed_payload_does_not_hide_later_ones(self):
        head = ld_json("{not json") + ld_json({"@type": "CollectionPage", "mainEntity": {"identifier": "111222333"}})
        assert self.strategy.attempt(html_page(head), min_length=6) == "111222333"

    def test_first_valid_payload_wins(self):
        head = ld_json({"identifier": "abc"}) + ld_json({"identifier": "222333444"}) + ld_json(
            {"identifier": "999888777"}
        )
        assert self.strategy.attempt(html_page(head), min_length=6) == "222333444"

    def test_array_and_graph_payloads(self):
        page = html_page(ld_json([{"@type": "Person", "name": "x"}, {"@graph": [{"identifier": "333444555"}]}]))
        assert self.strategy.attempt(page, min_length=6) == "333444555"

    def test_no_scripts(self):
        assert self.strategy.attempt(html_page(), min_length=6) is None


class TestHydrationStateStrategy:
    strategy = HydrationStateStrategy()

    def test_board_id(self):
        state = {"props": {"initialReduxState": {"boards": {"x": {"board_id": "444555666"}}}}}
        assert self.strategy.attempt(html_page(body=pws_data(state)), min_length=6) == "444555666"

    def test_board_id_preferred_over_entity_id(self):
        state = {"context": {"entity_id": "100000001"}, "resources": {"board_id": "200000002"}}
        assert self.strategy.attempt(html_page(body=pws_data(state)), min_length=6) == "200000002"

    def test_entity_id_fallback(self):
        state = {"props": {"context": {"entity_id": "300000003"}}}
        assert self.strategy.attempt(html_page(body=pws_data(state)), min_length=6) == "300000003"

    def test_invalid_board_id_falls_back_to_entity_id(self):
        state = {"board_id": "n/a", "nested": {"entity_id": "400000004"}}
        assert self.strategy.attempt(html_page(body=pws_data(state)), min_length=6) == "400000004"

    def test_malformed_payload(self):
        assert self.strategy.attempt(html_page(body=pws_data("{broken")), min_length=6) is None

    def test_missing_payload(self):
        assert self.strategy.attempt(html_page(), min_length=6) is None


class TestReactPropsStrategy:
    strategy = ReactPropsStrategy()

    def live_page(self, framework_props) -> LiveDomPage:
        return LiveDomPage(url=BOARD_URL, html=make_html(), framework_props=tuple(framework_props))

    def test_not_supported_on_fetched_html(self):
        assert not self.strategy.supports(html_page())

    def test_first_matching_anchor(self):
        page = self.live_page(
            [
                ("board-header", {"__reactFiber$abc": {"board_id": "999999999"}, "__reactProps$abc": {"x": 1}}),
                ("board-title", {"__reactProps$abc": {"children": [{"props": {"board_id": "123123123"}}]}}),
                ("body", {"__reactProps$abc": {"board_id": "456456456"}}),
            ]
        )
        assert self.strategy.supports(page)
        assert self.strategy.attempt(page, min_length=6) == "123123123"

    def test_anchor_without_props_key_skipped(self):
        page = self.live_page([("board-header", {}), ("body", {"__reactProps$z": {"board_id": "777888999"}})])
        assert self.strategy.attempt(page, min_length=6) == "777888999"

    def test_no_anchors(self):
        assert self.strategy.attempt(self.live_page([]), min_length=6) is None


class TestRegexStrategies:
    narrow = RegexStrategy()
    broad = BroadRegexStrategy()

    @pytest.mark.parametrize(
        "body,expected",
        [
            ('<script>{"board_id": "121212121"}</script>', "121212121"),
            ('<script>{"board": {"name": "x", "id": 343434343}}</script>', "343434343"),
            ('<div data-board-id="565656565"></div>', "565656565"),
            ('<script>{"element_id": "787878787"}</script>', "787878787"),
            ('<script>{"objectId": 909090909}</script>', "909090909"),
        ],
    )
    def test_narrow_patterns(self, body, expected):
        assert self.narrow.attempt(html_page(body=body), min_length=6) == expected

    def test_narrow_pattern_order(self):
        body = '<div data-board-id="565656565"></div><script>{"board_id": "121212121"}</script>'
        assert self.narrow.attempt(html_page(body=body), min_length=6) == "121212121"

    def test_short_match_moves_to_next_pattern(self):
        body = '<script>{"board_id": "12"}</script><div data-board-id="565656565"></div>'
        assert self.narrow.attempt(html_page(body=body), min_length=6) == "565656565"

    def test_broad_pattern(self):
        body = '<script>{"type": "board", "owner": {"name": "someone"}, "id": "1234567890123"}</script>'
        page = html_page(body=body)
        assert self.narrow.attempt(page, min_length=6) is None
        assert self.broad.attempt(page, min_length=6) == "1234567890123"

    def test_broad_pattern_needs_long_id(self):
        body = '<script>{"category": "board", "id": "123456789"}</script>'
        assert self.broad.attempt(html_page(body=body), min_length=6) is None

    def test_broad_pattern_window(self):
        body = '<script>{"type": "board", "pad": "' + "x" * 450 + '", "id": "1234567890123"}</script>'
        assert self.broad.attempt(html_page(body=body), min_length=6) is None

    def test_not_supported_on_live_pages(self):
        live = LiveDomPage(url=BOARD_URL, html=make_html())
        assert not self.narrow.supports(live)
        assert not self.broad.supports(live)
