"""Built-in default token catalog, a subset of the Uniswap default token list."""

UNISWAP_LOGO_BASE = "https://raw.githubusercontent.com/Uniswap/assets/master/blockchains"

# Uniswap token-list format: chainId / logoURI spelling is kept as-is
DEFAULT_TOKENS: list[dict] = [
    # Ethereum mainnet
    {
        "chainId": 1,
        "address": "0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48",
        "name": "USDCoin",
        "symbol": "USDC",
        "decimals": 6,
        "logoURI": f"{UNISWAP_LOGO_BASE}/ethereum/assets/0xA0b86991c6218b36c1d19D4a2e9Eb0cE3606eB48/logo.png",
    },
    {
        "chainId": 1,
        "address": "0xdAC17F958D2ee523a2206206994597C13D831ec7",
        "name": "Tether USD",
        "symbol": "USDT",
        "decimals": 6,
        "logoURI": f"{UNISWAP_LOGO_BASE}/ethereum/assets/0xdAC17F958D2ee523a2206206994597C13D831ec7/logo.png",
    },
    {
        "chainId": 1,
        "address": "0x6B175474E89094C44Da98b954EedeAC495271d0F",
        "name": "Dai Stablecoin",
        "symbol": "DAI",
        "decimals": 18,
        "logoURI": f"{UNISWAP_LOGO_BASE}/ethereum/assets/0x6B175474E89094C44Da98b954EedeAC495271d0F/logo.png",
    },
    {
        "chainId": 1,
        "address": "0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2",
        "name": "Wrapped Ether",
        "symbol": "WETH",
        "decimals": 18,
        "logoURI": f"{UNISWAP_LOGO_BASE}/ethereum/assets/0xC02aaA39b223FE8D0A0e5C4F27eAD9083C756Cc2/logo.png",
    },
    {
        "chainId": 1,
        "address": "0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599",
        "name": "Wrapped BTC",
        "symbol": "WBTC",
        "decimals": 8,
        "logoURI": f"{UNISWAP_LOGO_BASE}/ethereum/assets/0x2260FAC5E5542a773Aa44fBCfeDf7C193bc2C599/logo.png",
    },
    {
        "chainId": 1,
        "address": "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984",
        "name": "Uniswap",
        "symbol": "UNI",
        "decimals": 18,
        "logoURI": "ipfs://QmXttGpZrECX5qCyXbBQiqgQNytVGeZW5Anewvh2jc4psg",
    },
    {
        "chainId": 1,
        "address": "0x514910771AF9Ca656af840dff83E8264EcF986CA",
        "name": "ChainLink Token",
        "symbol": "LINK",
        "decimals": 18,
        "logoURI": f"{UNISWAP_LOGO_BASE}/ethereum/assets/0x514910771AF9Ca656af840dff83E8264EcF986CA/logo.png",
    },
    # Optimism
    {
        "chainId": 10,
        "address": "0x4200000000000000000000000000000000000006",
        "name": "Wrapped Ether",
        "symbol": "WETH",
        "decimals": 18,
    },
    {
        "chainId": 10,
        "address": "0x0b2C639c533813f4Aa9D7837CAf62653d097Ff85",
        "name": "USDCoin",
        "symbol": "USDC",
        "decimals": 6,
    },
    {
        "chainId": 10,
        "address": "0xDA10009cBd5D07dd0CeCc66161FC93D7c9000da1",
        "name": "Dai Stablecoin",
        "symbol": "DAI",
        "decimals": 18,
    },
    # Polygon
    {
        "chainId": 137,
        "address": "0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270",
        "name": "Wrapped Matic",
        "symbol": "WMATIC",
        "decimals": 18,
    },
    {
        "chainId": 137,
        "address": "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174",
        "name": "USDCoin (PoS)",
        "symbol": "USDC",
        "decimals": 6,
    },
    {
        "chainId": 137,
        "address": "0xc2132D05D31c914a87C6611C10748AEb04B58e8F",
        "name": "Tether USD (PoS)",
        "symbol": "USDT",
        "decimals": 6,
    },
    # Base
    {
        "chainId": 8453,
        "address": "0x4200000000000000000000000000000000000006",
        "name": "Wrapped Ether",
        "symbol": "WETH",
        "decimals": 18,
    },
    {
        "chainId": 8453,
        "address": "0x833589fCD6eDb6E08f4c7C32D4f71b54bdA02913",
        "name": "USD Coin",
        "symbol": "USDC",
        "decimals": 6,
    },
    # Arbitrum
    {
        "chainId": 42161,
        "address": "0x82aF49447D8a07e3bd95BD0d56f35241523fBab1",
        "name": "Wrapped Ether",
        "symbol": "WETH",
        "decimals": 18,
    },
    {
        "chainId": 42161,
        "address": "0xaf88d065e77c8cC2239327C5EDb3A432268e5831",
        "name": "USD Coin",
        "symbol": "USDC",
        "decimals": 6,
    },
    {
        "chainId": 42161,
        "address": "0xFd086bC7CD5C481DCC9C85ebE478A1C0b69FCbb9",
        "name": "Tether USD",
        "symbol": "USDT",
        "decimals": 6,
    },
    # Sepolia
    {
        "chainId": 11155111,
        "address": "0xfFf9976782d46CC05630D1f6eBAb18b2324d6B14",
        "name": "Wrapped Ether",
        "symbol": "WETH",
        "decimals": 18,
    },
    {
        "chainId": 11155111,
        "address": "0x1f9840a85d5aF5bf1D1762F925BDADdC4201F984",
        "name": "Uniswap",
        "symbol": "UNI",
        "decimals": 18,
    },
]
