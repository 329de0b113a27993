"""Pydantic models for analysis backend responses.

Field names follow the backend's camelCase JSON. The three result shapes are
wrapped in a tagged variant (``AnalysisOutcome``) so a result always carries
the kind it was requested as.
"""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal

from pydantic import BaseModel, Field, TypeAdapter


class AnalysisType(str, Enum):
    WALLET = "wallet"
    COLLECTION = "collection"
    NFT = "nft"


# ── Wallet ──────────────────────────────────────────────────────────────


class WalletToken(BaseModel):
    symbol: str
    balance: str  # decimal string
    price: float | None = None
    riskLevel: str
    riskFactors: list[str] = Field(default_factory=list)

    model_config = {"extra": "ignore", "coerce_numbers_to_str": True}


class WalletNFT(BaseModel):
    name: str
    riskLevel: str
    riskFactors: list[str] = Field(default_factory=list)

    model_config = {"extra": "ignore"}


class WalletResult(BaseModel):
    """Response from /api/wallet-scan."""

    address: str
    ethBalance: str  # decimal string, ETH
    riskLevel: str
    riskScore: float  # 0-100
    tokens: list[WalletToken] = Field(default_factory=list)
    nfts: list[WalletNFT] = Field(default_factory=list)
    summary: str = ""

    model_config = {"extra": "ignore", "coerce_numbers_to_str": True}


# ── Collection ──────────────────────────────────────────────────────────


class TopHolder(BaseModel):
    address: str
    count: int
    percentage: float  # of total supply

    model_config = {"extra": "ignore"}


class CollectionResult(BaseModel):
    """Response from /api/collection-check."""

    contractAddress: str
    name: str
    totalSupply: int
    floorPrice: float | None = None  # ETH
    holderCount: int
    topHolders: list[TopHolder] = Field(default_factory=list)  # ranked, largest first
    riskLevel: str
    riskFactors: list[str] = Field(default_factory=list)
    auditStatus: str

    model_config = {"extra": "ignore"}


# ── Single NFT ──────────────────────────────────────────────────────────


class NFTAttribute(BaseModel):
    trait_type: str | None = None
    type: str | None = None
    value: str | int | float | bool | None = None

    model_config = {"extra": "ignore"}


class NFTMetadata(BaseModel):
    collection: str | None = None
    owner: str | None = None
    verified: bool = False
    attributes: list[NFTAttribute] | None = None

    model_config = {"extra": "ignore"}


class NFTResult(BaseModel):
    """Response from /api/nft-analyzer."""

    contractAddress: str
    tokenId: str
    name: str
    description: str = ""
    riskLevel: str
    riskFactors: list[str] = Field(default_factory=list)
    metadata: NFTMetadata | None = None

    model_config = {"extra": "ignore", "coerce_numbers_to_str": True}


# ── Tagged variant ──────────────────────────────────────────────────────


class WalletAnalysis(BaseModel):
    kind: Literal["wallet"] = "wallet"
    result: WalletResult


class CollectionAnalysis(BaseModel):
    kind: Literal["collection"] = "collection"
    result: CollectionResult


class NFTAnalysis(BaseModel):
    kind: Literal["nft"] = "nft"
    result: NFTResult


AnalysisOutcome = Annotated[
    WalletAnalysis | CollectionAnalysis | NFTAnalysis,
    Field(discriminator="kind"),
]

_outcome_adapter: TypeAdapter[AnalysisOutcome] = TypeAdapter(AnalysisOutcome)


def parse_outcome(kind: AnalysisType, data: object) -> AnalysisOutcome:
    """Validate a raw response body as the result of the given analysis kind.

    Raises ``pydantic.ValidationError`` when the body does not fit.
    """
    return _outcome_adapter.validate_python({"kind": kind.value, "result": data})


def parse_outcome_json(text: str | bytes) -> AnalysisOutcome:
    """Restore an outcome serialized with ``model_dump_json``."""
    return _outcome_adapter.validate_json(text)
