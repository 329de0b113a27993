"""Analyzer page state — the inputs, the loading flag and the last result.

Mutated only through the event methods below. One instance backs one page
render; nothing here is shared between requests.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from loguru import logger

from src.analyzer.exceptions import AnalyzerError
from src.analyzer.models import AnalysisOutcome, AnalysisType

if TYPE_CHECKING:
    from src.analyzer.client import AnalyzerClient

PLACEHOLDERS: dict[AnalysisType, list[str]] = {
    AnalysisType.WALLET: [
        "0x742d35Cc6634C0532925a3b8D4C0C3c6c8C8C6C6",
        "Enter Ethereum wallet address...",
        "Analyze wallet for risks...",
    ],
    AnalysisType.COLLECTION: [
        "0xBC4CA0EdA7647A8aB7C2061c2E118A18a936f13D",
        "Enter NFT collection contract address...",
        "Analyze collection risks...",
    ],
    AnalysisType.NFT: [
        "0xBC4CA0EdA7647A8aB7C2061c2E118A18a936f13D",
        "Enter NFT contract address...",
        "Analyze specific NFT...",
    ],
}

HELP_TEXT: dict[AnalysisType, str] = {
    AnalysisType.WALLET: "Enter an Ethereum wallet address to analyze tokens and NFTs for risks",
    AnalysisType.COLLECTION: (
        "Enter an NFT collection contract address to analyze holder distribution and risks"
    ),
    AnalysisType.NFT: "Enter an NFT contract address and token ID to analyze metadata and ownership",
}


@dataclass
class AnalyzerPage:
    analysis_type: AnalysisType = AnalysisType.WALLET
    address: str = ""
    token_id: str = ""
    loading: bool = False
    result: AnalysisOutcome | None = None
    alert: str | None = None

    @property
    def show_token_id(self) -> bool:
        return self.analysis_type is AnalysisType.NFT

    @property
    def placeholders(self) -> list[str]:
        return PLACEHOLDERS[self.analysis_type]

    @property
    def help_text(self) -> str:
        return HELP_TEXT[self.analysis_type]

    # Events

    def select_type(self, analysis_type: AnalysisType) -> None:
        """Switch analysis type. Address and the last result are kept."""
        self.analysis_type = analysis_type

    def change_address(self, value: str) -> None:
        self.address = value

    def change_token_id(self, value: str) -> None:
        self.token_id = value

    async def submit(self, client: AnalyzerClient) -> None:
        """Dispatch the current inputs and store the outcome or an alert.

        ``loading`` is set for the duration of the call and always cleared
        afterwards. Overlapping submits are not guarded: whichever finishes
        last wins.
        """
        self.loading = True
        self.result = None
        self.alert = None
        try:
            self.result = await client.analyze(
                self.analysis_type, self.address, self.token_id
            )
        except AnalyzerError as e:
            logger.info(f"[PAGE] {self.analysis_type.value} analysis failed: {e}")
            self.alert = str(e)
            self.result = None
        finally:
            self.loading = False
