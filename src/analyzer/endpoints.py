# Paths on the analysis backend, relative to settings.analyzer_api_url
WALLET_SCAN = "/api/wallet-scan"
COLLECTION_CHECK = "/api/collection-check"
NFT_ANALYZER = "/api/nft-analyzer"
