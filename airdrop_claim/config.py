import os
from dotenv import load_dotenv

load_dotenv()

# --- Application ---
APP_ENV = os.getenv("APP_ENV", "dev")

# --- Airdrop claim API (tonapi) ---
AIRDROP_MAINNET_API_URL = os.getenv("AIRDROP_MAINNET_API_URL", "https://mainnet-airdrop.tonapi.io")
AIRDROP_TESTNET_API_URL = os.getenv("AIRDROP_TESTNET_API_URL", "https://testnet-airdrop.tonapi.io")
AIRDROP_API_TIMEOUT = int(os.getenv("AIRDROP_API_TIMEOUT", "15"))
AIRDROP_API_PROXY_URL = os.getenv("AIRDROP_API_PROXY_URL") or None
