"""Plain-text rendering of analysis results for the terminal."""

from typing import assert_never

from src.analyzer.models import AnalysisOutcome
from src.views.badges import Badge
from src.views.renderer import CollectionView, NFTView, WalletView, build_view

TONE_MARKS = {
    "low": "🟢",
    "medium": "🟡",
    "high": "🔴",
    "verified": "✅",
    "unverified": "❌",
}


def _badge(badge: Badge) -> str:
    mark = TONE_MARKS.get(badge.tone, "⚪")
    return f"{mark} {badge.label}"


def _risk_factor_lines(factors: list[str]) -> list[str]:
    if not factors:
        return []
    return ["", "Risk Factors:"] + [f"  • {f}" for f in factors]


def format_wallet(view: WalletView) -> str:
    lines = [
        f"Wallet Analysis  {_badge(view.badge)}",
        f"Address: {view.address}",
        f"ETH Balance: {view.eth_balance}",
        f"Risk Score: {view.score}",
    ]
    if view.tokens:
        lines.append(f"\nTokens ({len(view.tokens)}):")
        for token in view.tokens:
            value = f" ({token.value})" if token.value else ""
            lines.append(f"  {token.symbol} {token.balance}{value}  {_badge(token.badge)}")
            if token.risk_factors:
                lines.append(f"    ⚠️ {token.risk_factors}")
    if view.nfts:
        lines.append(f"\nNFTs ({len(view.nfts)}):")
        for nft in view.nfts:
            lines.append(f"  {nft.name}  {_badge(nft.badge)}")
            if nft.risk_factors:
                lines.append(f"    ⚠️ {nft.risk_factors}")
    lines.append(f"\nAnalysis Summary:\n{view.summary}")
    return "\n".join(lines)


def format_collection(view: CollectionView) -> str:
    lines = [
        f"Collection Analysis  {_badge(view.badge)}  {_badge(view.audit)}",
        f"Contract: {view.contract_address}",
        f"Collection Name: {view.name}",
        f"Total Supply: {view.total_supply}",
        f"Unique Holders: {view.holder_count}",
    ]
    if view.floor_price:
        lines.append(f"Floor Price: {view.floor_price}")
    if view.holders:
        lines.append("\nTop Holders:")
        for h in view.holders:
            lines.append(f"  #{h.rank} {h.short_address}  {h.count} NFTs  ({h.percentage}% of supply)")
    lines.extend(_risk_factor_lines(view.risk_factors))
    return "\n".join(lines)


def format_nft(view: NFTView) -> str:
    lines = [
        f"NFT Analysis  {_badge(view.badge)}",
        f"Contract: {view.contract_address}",
        f"Token ID: {view.token_id}",
        f"Name: {view.name}",
        f"Description: {view.description}",
    ]
    meta = view.metadata
    if meta is not None:
        lines.append("\nMetadata:")
        if meta.collection:
            lines.append(f"  Collection: {meta.collection}")
        if meta.owner:
            lines.append(f"  Owner: {meta.owner}")
        lines.append(f"  Verified: {'Yes' if meta.verified else 'No'}")
        if meta.attributes:
            lines.append("  Attributes:")
            lines.extend(f"    {a.label}: {a.value}" for a in meta.attributes)
    lines.extend(_risk_factor_lines(view.risk_factors))
    return "\n".join(lines)


def format_outcome(outcome: AnalysisOutcome) -> str:
    view = build_view(outcome)
    match view:
        case WalletView():
            return format_wallet(view)
        case CollectionView():
            return format_collection(view)
        case NFTView():
            return format_nft(view)
        case _:
            assert_never(view)
