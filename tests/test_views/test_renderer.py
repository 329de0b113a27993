"""Tests for result view models and HTML partials."""

from src.analyzer.models import AnalysisType, parse_outcome
from src.views.renderer import (
    CollectionView,
    NFTView,
    WalletView,
    build_view,
    render_result,
)


class TestBuildView:
    def test_dispatch_on_result_kind(self, wallet_payload, collection_payload, nft_payload) -> None:
        assert isinstance(build_view(parse_outcome(AnalysisType.WALLET, wallet_payload)), WalletView)
        assert isinstance(
            build_view(parse_outcome(AnalysisType.COLLECTION, collection_payload)), CollectionView
        )
        assert isinstance(build_view(parse_outcome(AnalysisType.NFT, nft_payload)), NFTView)

    def test_wallet_view(self, wallet_payload) -> None:
        view = build_view(parse_outcome(AnalysisType.WALLET, wallet_payload))
        assert view.eth_balance == "1.2346 ETH"
        assert view.score == "45/100"
        assert view.score_class == "bg-yellow-500"
        assert view.badge.label == "Medium Risk"

        usdc, scam = view.tokens
        assert usdc.balance == "1500.50"
        assert usdc.value == "$1500.50"
        assert usdc.risk_factors == ""
        assert scam.value is None
        assert scam.badge.label == "High Risk"
        assert scam.risk_factors == "Honeypot contract, Unverified source"

    def test_top_holders_capped_at_five(self, collection_payload) -> None:
        assert len(collection_payload["topHolders"]) == 10
        view = build_view(parse_outcome(AnalysisType.COLLECTION, collection_payload))
        assert [h.rank for h in view.holders] == [1, 2, 3, 4, 5]
        first = view.holders[0]
        assert first.short_address == "0x0000...0000"
        assert first.percentage == "1.0"
        assert first.count == 100

    def test_collection_numbers(self, collection_payload) -> None:
        view = build_view(parse_outcome(AnalysisType.COLLECTION, collection_payload))
        assert view.total_supply == "10,000"
        assert view.holder_count == "5,432"
        assert view.floor_price == "12.5000 ETH"
        assert view.audit.label == "Verified"

    def test_floor_price_hidden_when_missing(self, collection_payload) -> None:
        collection_payload["floorPrice"] = None
        view = build_view(parse_outcome(AnalysisType.COLLECTION, collection_payload))
        assert view.floor_price is None

    def test_attributes_capped_at_six(self, nft_payload) -> None:
        assert len(nft_payload["metadata"]["attributes"]) == 20
        view = build_view(parse_outcome(AnalysisType.NFT, nft_payload))
        assert view.metadata is not None
        assert len(view.metadata.attributes) == 6
        assert view.metadata.attributes[0].label == "Trait 0"

    def test_attribute_label_falls_back_to_type(self, nft_payload) -> None:
        nft_payload["metadata"]["attributes"] = [{"type": "Background", "value": "Blue"}]
        view = build_view(parse_outcome(AnalysisType.NFT, nft_payload))
        assert view.metadata.attributes[0].label == "Background"

    def test_owner_truncated(self, nft_payload) -> None:
        view = build_view(parse_outcome(AnalysisType.NFT, nft_payload))
        assert view.metadata.owner == "0x1234...1234"

    def test_unknown_risk_level_neutral_badge(self, nft_payload) -> None:
        view = build_view(parse_outcome(AnalysisType.NFT, nft_payload))
        assert view.badge.label == "unknown"
        assert view.badge.tone == "neutral"


class TestRenderResult:
    def test_wallet_html(self, wallet_payload) -> None:
        html = render_result(parse_outcome(AnalysisType.WALLET, wallet_payload))
        assert "Wallet Analysis" in html
        assert "Tokens (2)" in html
        assert "NFTs (1)" in html
        assert "width: 45%" in html
        assert 'data-copy="0x742d35Cc6634C0532925a3b8D4C0C3c6c8C8C6C6"' in html

    def test_empty_sections_hidden(self, wallet_payload) -> None:
        wallet_payload["tokens"] = []
        wallet_payload["nfts"] = []
        html = render_result(parse_outcome(AnalysisType.WALLET, wallet_payload))
        assert "Tokens (" not in html
        assert "NFTs (" not in html
        assert "Analysis Summary" in html

    def test_collection_html_shows_five_holders(self, collection_payload) -> None:
        html = render_result(parse_outcome(AnalysisType.COLLECTION, collection_payload))
        assert html.count('class="holder-row') == 5
        assert "#5" in html
        assert "#6" not in html
        assert "% of supply" in html

    def test_nft_html_shows_six_attributes(self, nft_payload) -> None:
        html = render_result(parse_outcome(AnalysisType.NFT, nft_payload))
        assert html.count('class="attribute') == 6
        assert "Value 5" in html
        assert "Value 6" not in html
        assert "verified-yes" in html
        assert "Risk Factors" not in html

    def test_nft_without_metadata(self, nft_payload) -> None:
        nft_payload["metadata"] = None
        nft_payload["riskFactors"] = ["Metadata hosted off-chain"]
        html = render_result(parse_outcome(AnalysisType.NFT, nft_payload))
        assert "Metadata</h4>" not in html
        assert "Metadata hosted off-chain" in html

    def test_backend_text_is_escaped(self, wallet_payload) -> None:
        wallet_payload["summary"] = "<script>alert(1)</script>"
        html = render_result(parse_outcome(AnalysisType.WALLET, wallet_payload))
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html
