"""Consistency checks for the static seed content."""

from src.adapters.memory.seed import PREVIEW_BLOCKS, build_seed_store
from src.api.deps import PROJECT_ROOT
from src.domain.blocks import (
    NavigateToArticleAction,
    PostBlock,
    UnknownBlock,
    decode_blocks,
    encode_blocks,
)
from src.rules.loader import load_rules


def _store():
    rules = load_rules(PROJECT_ROOT / "rules.yaml")
    return build_seed_store(rules.subscriptions)


class TestSeedStore:
    def test_general_feed_is_first_category(self) -> None:
        assert _store().get_categories()[0] == "general"

    def test_every_post_action_points_at_an_article(self) -> None:
        store = _store()
        for category in store.get_categories():
            feed = store.get_feed(category=category, limit=1000)
            for block in feed.blocks:
                if isinstance(block, PostBlock) and isinstance(
                    block.action, NavigateToArticleAction
                ):
                    assert store.get_news_item(block.action.article_id) is not None

    def test_previews_are_prefixes_of_content(self) -> None:
        store = _store()
        for block in store.get_feed(category="general", limit=1000).blocks:
            if not isinstance(block, PostBlock):
                continue
            item = store.get_news_item(block.id)
            assert item is not None
            assert len(item.content_preview) == PREVIEW_BLOCKS
            assert item.content_preview == item.content[:PREVIEW_BLOCKS]

    def test_seed_content_survives_the_codec(self) -> None:
        store = _store()
        blocks = store.get_feed(category="general", limit=1000).blocks
        decoded = decode_blocks(encode_blocks(blocks))
        assert not any(isinstance(b, UnknownBlock) for b in decoded)
        assert decoded == blocks

    def test_catalog_comes_from_rules(self) -> None:
        names = [s.name for s in _store().get_subscriptions()]
        assert names == ["premium", "plus", "basic"]
