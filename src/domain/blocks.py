"""
News block model and codec.

Every renderable unit of content is a NewsBlock subclass carrying a fixed
``type`` discriminator. ``decode_block`` dispatches on that discriminator only;
an unrecognized tag, or a recognized tag with malformed fields, decodes to
UnknownBlock so a single bad block never fails a whole batch.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from datetime import datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)

# --- Enums / Literals ---
PostCategory = Literal["business", "entertainment", "health", "science", "sports", "technology"]
Category = Literal[
    "business", "entertainment", "general", "health", "science", "sports", "technology"
]
ActionType = Literal["navigation", "unknown"]
TextCaptionColor = Literal["normal", "light"]
Spacing = Literal["extraSmall", "small", "medium", "large", "veryLarge", "extraLarge"]
BannerAdSize = Literal["normal", "large", "extraLarge", "anchoredAdaptive"]


class _WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


# --- Base Blocks ---


class NewsBlock(_WireModel):
    type: str


class UnknownBlock(NewsBlock):
    type: Literal["__unknown__"] = "__unknown__"


class SlideBlock(NewsBlock):
    type: Literal["__slide__"] = "__slide__"
    caption: str
    description: str
    photo_credit: str
    image_url: str


class SlideshowBlock(NewsBlock):
    type: Literal["__slideshow__"] = "__slideshow__"
    title: str
    slides: list[SlideBlock]


# --- Actions ---


class BlockAction(_WireModel):
    type: str
    action_type: ActionType = "navigation"


class NavigateToArticleAction(BlockAction):
    type: Literal["__navigate_to_article__"] = "__navigate_to_article__"
    article_id: str


class NavigateToFeedCategoryAction(BlockAction):
    type: Literal["__navigate_to_feed_category__"] = "__navigate_to_feed_category__"
    category: Category


class NavigateToVideoArticleAction(BlockAction):
    type: Literal["__navigate_to_video_article__"] = "__navigate_to_video_article__"
    article_id: str


class NavigateToSlideshowAction(BlockAction):
    type: Literal["__navigate_to_slideshow__"] = "__navigate_to_slideshow__"
    article_id: str
    slideshow: SlideshowBlock


class UnknownBlockAction(BlockAction):
    type: Literal["__unknown__"] = "__unknown__"
    action_type: ActionType = "unknown"


AnyBlockAction = (
    NavigateToArticleAction
    | NavigateToFeedCategoryAction
    | NavigateToVideoArticleAction
    | NavigateToSlideshowAction
    | UnknownBlockAction
)


class _ActionMixin(_WireModel):
    """Decodes an optional ``action`` field through the action registry."""

    action: AnyBlockAction | None = None

    @field_validator("action", mode="before")
    @classmethod
    def _decode_action(cls, value: Any) -> Any:
        if value is None or isinstance(value, BlockAction):
            return value
        if isinstance(value, Mapping):
            return decode_action(value)
        return UnknownBlockAction()


# --- Post Previews ---


class PostBlock(NewsBlock, _ActionMixin):
    """Shared fields of every feed preview of an article."""

    id: str
    category: PostCategory
    author: str
    published_at: datetime
    title: str
    image_url: str | None = None
    description: str | None = None
    is_premium: bool = False
    is_content_overlaid: bool = False


class PostLargeBlock(PostBlock):
    type: Literal["__post_large__"] = "__post_large__"
    image_url: str


class PostMediumBlock(PostBlock):
    type: Literal["__post_medium__"] = "__post_medium__"
    image_url: str


class PostSmallBlock(PostBlock):
    type: Literal["__post_small__"] = "__post_small__"


class PostGridTileBlock(PostBlock):
    type: Literal["__post_grid_tile__"] = "__post_grid_tile__"
    image_url: str
    is_content_overlaid: bool = True


class PostGridGroupBlock(NewsBlock):
    type: Literal["__post_grid_group__"] = "__post_grid_group__"
    category: PostCategory
    tiles: list[PostGridTileBlock]


# --- Text ---


class TextHeadlineBlock(NewsBlock):
    type: Literal["__text_headline__"] = "__text_headline__"
    text: str


class TextLeadParagraphBlock(NewsBlock):
    type: Literal["__text_lead_paragraph__"] = "__text_lead_paragraph__"
    text: str


class TextParagraphBlock(NewsBlock):
    type: Literal["__text_paragraph__"] = "__text_paragraph__"
    text: str


class TextCaptionBlock(NewsBlock):
    type: Literal["__text_caption__"] = "__text_caption__"
    text: str
    color: TextCaptionColor = "normal"


# --- Media ---


class ImageBlock(NewsBlock):
    type: Literal["__image__"] = "__image__"
    image_url: str


class VideoBlock(NewsBlock):
    type: Literal["__video__"] = "__video__"
    video_url: str


class VideoIntroductionBlock(NewsBlock):
    type: Literal["__video_introduction__"] = "__video_introduction__"
    category: PostCategory
    title: str
    video_url: str


# --- Layout ---


class SectionHeaderBlock(NewsBlock, _ActionMixin):
    type: Literal["__section_header__"] = "__section_header__"
    title: str


class DividerHorizontalBlock(NewsBlock):
    type: Literal["__divider_horizontal__"] = "__divider_horizontal__"


class SpacerBlock(NewsBlock):
    type: Literal["__spacer__"] = "__spacer__"
    spacing: Spacing


# --- Special ---


class BannerAdBlock(NewsBlock):
    type: Literal["__banner_ad__"] = "__banner_ad__"
    size: BannerAdSize


class NewsletterBlock(NewsBlock):
    type: Literal["__newsletter__"] = "__newsletter__"


class TrendingStoryBlock(NewsBlock):
    type: Literal["__trending_story__"] = "__trending_story__"
    content: PostSmallBlock


class SlideshowIntroductionBlock(NewsBlock, _ActionMixin):
    type: Literal["__slideshow_introduction__"] = "__slideshow_introduction__"
    title: str
    cover_image_url: str


class HtmlBlock(NewsBlock):
    type: Literal["__html__"] = "__html__"
    content: str


class ArticleIntroductionBlock(NewsBlock):
    type: Literal["__article_introduction__"] = "__article_introduction__"
    category: PostCategory
    author: str
    published_at: datetime
    title: str
    image_url: str | None = None
    is_premium: bool = False


# --- Registries ---


def _registry(*classes: type[_WireModel]) -> dict[str, type[Any]]:
    return {cls.model_fields["type"].default: cls for cls in classes}


BLOCK_TYPES: dict[str, type[NewsBlock]] = _registry(
    PostLargeBlock,
    PostMediumBlock,
    PostSmallBlock,
    PostGridGroupBlock,
    PostGridTileBlock,
    TextHeadlineBlock,
    TextLeadParagraphBlock,
    TextParagraphBlock,
    TextCaptionBlock,
    ImageBlock,
    VideoBlock,
    VideoIntroductionBlock,
    SectionHeaderBlock,
    DividerHorizontalBlock,
    SpacerBlock,
    BannerAdBlock,
    NewsletterBlock,
    TrendingStoryBlock,
    SlideshowBlock,
    SlideshowIntroductionBlock,
    SlideBlock,
    HtmlBlock,
    ArticleIntroductionBlock,
    UnknownBlock,
)

ACTION_TYPES: dict[str, type[BlockAction]] = _registry(
    NavigateToArticleAction,
    NavigateToFeedCategoryAction,
    NavigateToVideoArticleAction,
    NavigateToSlideshowAction,
    UnknownBlockAction,
)


# --- Codec ---


def encode_block(block: NewsBlock) -> dict[str, Any]:
    """Encode a block to its JSON-ready wire record (camelCase keys)."""
    return block.model_dump(mode="json", by_alias=True)


def encode_blocks(blocks: Iterable[NewsBlock]) -> list[dict[str, Any]]:
    return [encode_block(block) for block in blocks]


def decode_block(record: Any) -> NewsBlock:
    """
    Decode a wire record into its block variant.

    Never raises: a record that is not a mapping, carries an unknown ``type``,
    or fails field validation for its variant decodes to UnknownBlock.
    """
    if not isinstance(record, Mapping):
        return UnknownBlock()

    block_type = record.get("type")
    cls = BLOCK_TYPES.get(block_type) if isinstance(block_type, str) else None
    if cls is None:
        return UnknownBlock()

    try:
        return cls.model_validate(dict(record))
    except ValidationError as e:
        logger.warning(f"Block '{block_type}' failed to decode ({e.error_count()} errors)")
        return UnknownBlock()


def decode_blocks(records: Iterable[Any]) -> list[NewsBlock]:
    return [decode_block(record) for record in records]


def decode_action(record: Mapping[str, Any]) -> BlockAction:
    """Decode an action record; unknown or malformed actions become UnknownBlockAction."""
    action_type = record.get("type")
    cls = ACTION_TYPES.get(action_type) if isinstance(action_type, str) else None
    if cls is None:
        return UnknownBlockAction()

    try:
        return cls.model_validate(dict(record))
    except ValidationError as e:
        logger.warning(f"Action '{action_type}' failed to decode ({e.error_count()} errors)")
        return UnknownBlockAction()
