"""View dispatcher: category variant -> view model.

Dispatch is a lookup on Category.variant. Every variant shares the same
empty state, and only the default card grid exposes the time-window
controls.
"""

from datetime import datetime, timezone
from typing import Callable, Optional, Sequence

from pydantic import BaseModel, Field

from market_scout.filtering.window import WindowSelector
from market_scout.models.category import Category, RenderVariant
from market_scout.models.opportunity import OpportunityRecord

from .dates import NOT_AVAILABLE, format_date

READ_MORE_LABEL = "Read Full Article"
EMPTY_HEADING = "No opportunities found"
EMPTY_HINT = "Try adjusting your search criteria or check back later."


class CardView(BaseModel):
    """One card in the default grid."""

    key: str
    title: str
    source: str = NOT_AVAILABLE
    date_label: str = NOT_AVAILABLE
    summary: Optional[str] = None
    link: Optional[str] = None
    link_label: str = READ_MORE_LABEL


class LinkItem(BaseModel):
    key: str
    title: str
    link: Optional[str] = None


class ProfileView(BaseModel):
    """Single company profile card."""

    company_name: str
    founded: Optional[str] = None
    product_range: list[str] = Field(default_factory=list)
    website: Optional[str] = None
    address: Optional[str] = None


class ResultsSummary(BaseModel):
    count: int
    headline: str
    filter_label: str


class EmptyState(BaseModel):
    heading: str = EMPTY_HEADING
    message: str
    hint: str = EMPTY_HINT


class ViewModel(BaseModel):
    """Everything the result area needs to draw itself."""

    category: str
    variant: RenderVariant = RenderVariant.DEFAULT
    window: WindowSelector = WindowSelector.ALL
    show_window_controls: bool = True

    loading: bool = False
    loading_message: Optional[str] = None
    empty: Optional[EmptyState] = None

    summary: Optional[ResultsSummary] = None
    cards: list[CardView] = Field(default_factory=list)
    links: list[LinkItem] = Field(default_factory=list)
    profile: Optional[ProfileView] = None

    @property
    def state(self) -> str:
        """loading | empty | results"""
        if self.loading:
            return "loading"
        if self.empty is not None:
            return "empty"
        return "results"


def _base(category: Category, window: WindowSelector) -> dict:
    return {
        "category": category.name,
        "variant": category.variant,
        "window": window,
        "show_window_controls": category.variant.has_window_controls,
    }


def loading_view(category: Category, window: WindowSelector = WindowSelector.ALL) -> ViewModel:
    return ViewModel(
        **_base(category, window),
        loading=True,
        loading_message=f"Loading latest {category.name} opportunities...",
    )


def empty_view(category: Category, window: WindowSelector) -> ViewModel:
    return ViewModel(
        **_base(category, window),
        empty=EmptyState(
            message=f"No opportunities found for {category.name} ({window.label})."
        ),
    )


def _render_cards(
    category: Category,
    records: Sequence[OpportunityRecord],
    window: WindowSelector,
    now: datetime,
) -> ViewModel:
    cards = [
        CardView(
            key=r.key(i),
            title=r.title,
            source=r.source or NOT_AVAILABLE,
            date_label=format_date(r.date, now),
            summary=r.summary,
            link=r.link,
        )
        for i, r in enumerate(records)
    ]
    summary = ResultsSummary(
        count=len(cards),
        headline=f"{len(cards)} opportunities found for {category.name}",
        filter_label=f"Filter: {window.label}",
    )
    return ViewModel(**_base(category, window), summary=summary, cards=cards)


def _render_links(
    category: Category,
    records: Sequence[OpportunityRecord],
    window: WindowSelector,
    now: datetime,
) -> ViewModel:
    links = [LinkItem(key=r.key(i), title=r.title, link=r.link) for i, r in enumerate(records)]
    return ViewModel(**_base(category, window), links=links)


def _render_profile(
    category: Category,
    records: Sequence[OpportunityRecord],
    window: WindowSelector,
    now: datetime,
) -> ViewModel:
    entity = records[0]
    profile = ProfileView(
        company_name=entity.company_name or entity.title,
        founded=entity.founded,
        product_range=list(entity.product_range),
        website=entity.website or entity.link or category.reference_url,
        address=entity.address,
    )
    return ViewModel(**_base(category, window), profile=profile)


Renderer = Callable[[Category, Sequence[OpportunityRecord], WindowSelector, datetime], ViewModel]

_RENDERERS: dict[RenderVariant, Renderer] = {
    RenderVariant.DEFAULT: _render_cards,
    RenderVariant.LINK_LIST: _render_links,
    RenderVariant.PROFILE: _render_profile,
}


def render(
    category: Category,
    records: Sequence[OpportunityRecord],
    window: WindowSelector = WindowSelector.ALL,
    now: Optional[datetime] = None,
) -> ViewModel:
    """Render already-filtered records using the category's variant."""
    if not records:
        return empty_view(category, window)
    if now is None:
        now = datetime.now(timezone.utc)
    return _RENDERERS[category.variant](category, records, window, now)


def render_text(view: ViewModel) -> str:
    """Plain-text rendering of a view model (CLI output)."""
    lines: list[str] = []
    if view.loading:
        return view.loading_message or "Loading..."
    if view.empty is not None:
        return "\n".join([view.empty.heading, view.empty.message, view.empty.hint])

    if view.summary is not None:
        lines.append(f"{view.summary.headline}  [{view.summary.filter_label}]")
        lines.append("")
    for card in view.cards:
        lines.append(card.title)
        lines.append(f"  Source: {card.source}")
        lines.append(f"  Date: {card.date_label}")
        if card.summary:
            lines.append(f"  {card.summary}")
        if card.link:
            lines.append(f"  {card.link_label}: {card.link}")
        lines.append("")

    for i, item in enumerate(view.links, 1):
        lines.append(f"{i}. {item.title}" + (f" <{item.link}>" if item.link else ""))

    if view.profile is not None:
        p = view.profile
        lines.append(p.company_name)
        if p.founded:
            lines.append(f"  Founded: {p.founded}")
        if p.product_range:
            lines.append(f"  Products: {', '.join(p.product_range)}")
        if p.website:
            lines.append(f"  Website: {p.website}")
        if p.address:
            lines.append(f"  Address: {p.address}")

    return "\n".join(lines).rstrip()
