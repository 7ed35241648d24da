"""
Snapshot collector for a page already rendered in a browser.

Works with any object shaped like a Playwright ``Page`` (``url``,
``content()``, ``evaluate()``, ``title()``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Mapping, Tuple

import structlog

from ..extractor.page import ANCHOR_PRIORITY, LiveDomPage

if TYPE_CHECKING:
    from playwright.async_api import Page

logger = structlog.get_logger(__name__)

ANCHOR_SELECTORS: Dict[str, str] = {
    "board-header": '[data-test-id="board-header"]',
    "board-title": '[data-test-id="board-title"]',
    "root-first-child": "#__PWS_ROOT__ > *",
    "body": "body",
}

# Copies the element's own framework-internal keys into plain JSON data.
# Functions, DOM nodes and already-seen objects are dropped; depth is capped.
_COLLECT_PROPS_JS = """
([anchors, prefix, maxDepth]) => {
  const prune = (value, depth, seen) => {
    if (value === null || typeof value !== 'object') {
      return typeof value === 'function' || typeof value === 'symbol' ? undefined : value;
    }
    if (depth > maxDepth || seen.has(value) || value instanceof Node) return undefined;
    seen.add(value);
    if (Array.isArray(value)) return value.map((item) => prune(item, depth + 1, seen));
    const out = {};
    for (const key of Object.keys(value)) {
      const pruned = prune(value[key], depth + 1, seen);
      if (pruned !== undefined) out[key] = pruned;
    }
    return out;
  };
  const result = [];
  for (const [name, selector] of anchors) {
    const element = document.querySelector(selector);
    if (!element) continue;
    const keys = {};
    for (const key of Object.keys(element)) {
      if (key.startsWith(prefix)) keys[key] = prune(element[key], 0, new WeakSet());
    }
    result.push([name, keys]);
  }
  return result;
}
"""

FRAMEWORK_KEY_PREFIX = "__react"
MAX_PROPS_DEPTH = 24


async def collect_framework_props(page: Page) -> Tuple[Tuple[str, Mapping[str, Any]], ...]:
    """Read framework-internal keys of each anchor element, in priority order."""
    anchors = [[name, ANCHOR_SELECTORS[name]] for name in ANCHOR_PRIORITY]
    raw: List[Any] = await page.evaluate(_COLLECT_PROPS_JS, [anchors, FRAMEWORK_KEY_PREFIX, MAX_PROPS_DEPTH])
    collected = []
    for entry in raw or []:
        name, keys = entry
        if isinstance(keys, dict):
            collected.append((name, keys))
    return tuple(collected)


async def collect_snapshot(page: Page) -> LiveDomPage:
    """
    Take a read-only snapshot of a live page.

    A failure reading the framework props leaves them empty; the other
    strategies only need the rendered HTML.
    """
    html = await page.content()
    try:
        framework_props = await collect_framework_props(page)
    except Exception as e:
        logger.debug("Reading framework props failed", url=page.url, error=str(e))
        framework_props = ()
    return LiveDomPage(url=page.url, html=html, framework_props=framework_props)
