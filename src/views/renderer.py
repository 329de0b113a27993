"""Result views — one view model per analysis kind.

``build_view`` picks the view from the outcome's own ``kind``, so a result is
always rendered with the view it was requested for. ``render_result`` turns
the view into HTML with the matching Jinja2 partial.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import assert_never

from src.analyzer.models import (
    AnalysisOutcome,
    CollectionAnalysis,
    CollectionResult,
    NFTAnalysis,
    NFTAttribute,
    NFTResult,
    WalletAnalysis,
    WalletResult,
)
from src.views.badges import Badge, audit_badge, risk_badge
from src.views.formatting import (
    MAX_ATTRIBUTES,
    MAX_TOP_HOLDERS,
    cap,
    format_count,
    format_decimal,
    format_score,
    join_factors,
    risk_score_class,
    risk_score_width,
    token_value,
    truncate_address,
)
from src.views.templating import templates


@dataclass(frozen=True)
class TokenRow:
    symbol: str
    badge: Badge
    balance: str
    value: str | None
    risk_factors: str


@dataclass(frozen=True)
class NFTRow:
    name: str
    badge: Badge
    risk_factors: str


@dataclass(frozen=True)
class WalletView:
    address: str
    badge: Badge
    eth_balance: str
    score: str
    score_class: str
    score_width: str
    tokens: list[TokenRow]
    nfts: list[NFTRow]
    summary: str
    template: str = "partials/wallet.html"


@dataclass(frozen=True)
class HolderRow:
    rank: int
    address: str
    short_address: str
    percentage: str
    count: int


@dataclass(frozen=True)
class CollectionView:
    contract_address: str
    name: str
    total_supply: str
    holder_count: str
    floor_price: str | None
    badge: Badge
    audit: Badge
    holders: list[HolderRow]
    risk_factors: list[str]
    template: str = "partials/collection.html"


@dataclass(frozen=True)
class AttributeRow:
    label: str
    value: str


@dataclass(frozen=True)
class MetadataView:
    collection: str | None
    owner: str | None
    verified: bool
    attributes: list[AttributeRow] = field(default_factory=list)


@dataclass(frozen=True)
class NFTView:
    contract_address: str
    token_id: str
    name: str
    description: str
    badge: Badge
    metadata: MetadataView | None
    risk_factors: list[str]
    template: str = "partials/nft.html"


ResultView = WalletView | CollectionView | NFTView


def wallet_view(data: WalletResult) -> WalletView:
    return WalletView(
        address=data.address,
        badge=risk_badge(data.riskLevel),
        eth_balance=f"{format_decimal(data.ethBalance, 4)} ETH",
        score=format_score(data.riskScore),
        score_class=risk_score_class(data.riskScore),
        score_width=risk_score_width(data.riskScore),
        tokens=[
            TokenRow(
                symbol=t.symbol,
                badge=risk_badge(t.riskLevel),
                balance=format_decimal(t.balance, 2),
                value=token_value(t.balance, t.price),
                risk_factors=join_factors(t.riskFactors),
            )
            for t in data.tokens
        ],
        nfts=[
            NFTRow(
                name=n.name,
                badge=risk_badge(n.riskLevel),
                risk_factors=join_factors(n.riskFactors),
            )
            for n in data.nfts
        ],
        summary=data.summary,
    )


def collection_view(data: CollectionResult) -> CollectionView:
    holders = [
        HolderRow(
            rank=i,
            address=h.address,
            short_address=truncate_address(h.address),
            percentage=f"{h.percentage:.1f}",
            count=h.count,
        )
        for i, h in enumerate(cap(data.topHolders, MAX_TOP_HOLDERS), start=1)
    ]
    return CollectionView(
        contract_address=data.contractAddress,
        name=data.name,
        total_supply=format_count(data.totalSupply),
        holder_count=format_count(data.holderCount),
        floor_price=f"{data.floorPrice:.4f} ETH" if data.floorPrice else None,
        badge=risk_badge(data.riskLevel),
        audit=audit_badge(data.auditStatus),
        holders=holders,
        risk_factors=list(data.riskFactors),
    )


def _attribute_row(attr: NFTAttribute) -> AttributeRow:
    value = attr.value
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif value is None:
        text = ""
    else:
        text = str(value)
    return AttributeRow(label=attr.trait_type or attr.type or "", value=text)


def nft_view(data: NFTResult) -> NFTView:
    metadata = None
    if data.metadata is not None:
        meta = data.metadata
        metadata = MetadataView(
            collection=meta.collection or None,
            owner=truncate_address(meta.owner) if meta.owner else None,
            verified=meta.verified,
            attributes=[_attribute_row(a) for a in cap(meta.attributes or [], MAX_ATTRIBUTES)],
        )
    return NFTView(
        contract_address=data.contractAddress,
        token_id=data.tokenId,
        name=data.name,
        description=data.description,
        badge=risk_badge(data.riskLevel),
        metadata=metadata,
        risk_factors=list(data.riskFactors),
    )


def build_view(outcome: AnalysisOutcome) -> ResultView:
    match outcome:
        case WalletAnalysis(result=data):
            return wallet_view(data)
        case CollectionAnalysis(result=data):
            return collection_view(data)
        case NFTAnalysis(result=data):
            return nft_view(data)
        case _:
            assert_never(outcome)


def render_result(outcome: AnalysisOutcome) -> str:
    """Render one result as an HTML fragment."""
    view = build_view(outcome)
    return templates.get_template(view.template).render(view=view)
