"""Shared test fixtures — backend payloads and a fake analysis client."""

from typing import Any

import pytest

from src.analyzer.exceptions import AnalyzerError
from src.analyzer.models import AnalysisOutcome, AnalysisType, parse_outcome

WALLET_ADDRESS = "0x742d35Cc6634C0532925a3b8D4C0C3c6c8C8C6C6"
BAYC = "0xBC4CA0EdA7647A8aB7C2061c2E118A18a936f13D"


@pytest.fixture
def wallet_payload() -> dict[str, Any]:
    return {
        "address": WALLET_ADDRESS,
        "ethBalance": "1.234567",
        "riskLevel": "Medium",
        "riskScore": 45,
        "tokens": [
            {
                "symbol": "USDC",
                "balance": "1500.5",
                "price": 1.0,
                "riskLevel": "low",
                "riskFactors": [],
            },
            {
                "symbol": "SCAM",
                "balance": "1000000",
                "riskLevel": "HIGH",
                "riskFactors": ["Honeypot contract", "Unverified source"],
            },
        ],
        "nfts": [
            {"name": "Free Mint Pass", "riskLevel": "high", "riskFactors": ["Airdropped"]},
        ],
        "summary": "Wallet holds one suspicious token.",
    }


@pytest.fixture
def collection_payload() -> dict[str, Any]:
    return {
        "contractAddress": BAYC,
        "name": "BoredApeYachtClub",
        "totalSupply": 10000,
        "floorPrice": 12.5,
        "holderCount": 5432,
        "topHolders": [
            {"address": f"0x{i:040x}", "count": 100 - i, "percentage": (100 - i) / 100}
            for i in range(10)
        ],
        "riskLevel": "low",
        "riskFactors": ["Top holder owns 1% of supply"],
        "auditStatus": "Verified",
    }


@pytest.fixture
def nft_payload() -> dict[str, Any]:
    return {
        "contractAddress": BAYC,
        "tokenId": "42",
        "name": "Bored Ape #42",
        "description": "An ape.",
        "riskLevel": "unknown",
        "riskFactors": [],
        "metadata": {
            "collection": "BoredApeYachtClub",
            "owner": "0x1234567890abcdef1234",
            "verified": True,
            "attributes": [
                {"trait_type": f"Trait {i}", "value": f"Value {i}"} for i in range(20)
            ],
        },
    }


class FakeAnalyzer:
    """Stands in for AnalyzerClient: records calls, returns or raises a canned answer."""

    def __init__(self, data: Any = None, error: AnalyzerError | None = None) -> None:
        self.data = data
        self.error = error
        self.calls: list[tuple[AnalysisType, str, str]] = []

    async def analyze(
        self, analysis_type: AnalysisType, address: str, token_id: str = ""
    ) -> AnalysisOutcome:
        self.calls.append((analysis_type, address, token_id))
        if self.error is not None:
            raise self.error
        return parse_outcome(analysis_type, self.data)

    async def close(self) -> None:
        pass


@pytest.fixture
def make_analyzer() -> type[FakeAnalyzer]:
    return FakeAnalyzer
