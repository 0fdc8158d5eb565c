import argparse
import asyncio
import json
import logging
import sys
from dotenv import load_dotenv

load_dotenv()

from . import config
from .claim import build_transaction, fetch_airdrop_claim

# Logging settings
if config.APP_ENV == 'prod':
    log_level = logging.WARNING # Only WARNING and ERROR
    log_level_name = 'WARNING'
else:
    # dev
    log_level = logging.INFO
    log_level_name = 'INFO'
logging.basicConfig(level=log_level, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)
logger.info(f"Logging level set to {log_level_name} based on APP_ENV='{config.APP_ENV}'")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fetch a jetton airdrop claim from tonapi.")
    parser.add_argument("airdrop_id", help="Airdrop identifier")
    parser.add_argument("address", help="Claim destination address (user-friendly form)")
    parser.add_argument("--testnet", action="store_true", help="Use the testnet airdrop API")
    parser.add_argument("--transaction", action="store_true",
                        help="Also print the wallet transaction for a successful claim")
    return parser.parse_args(argv)


async def run(args: argparse.Namespace) -> int:
    result = await fetch_airdrop_claim(args.airdrop_id, args.address, testnet=args.testnet)

    print(json.dumps(result.to_dict(), indent=2))
    if not result.success:
        logger.warning(f"Claim for {args.address} failed: {result.error.code} - {result.error.message}")
        return 1

    if args.transaction:
        print(json.dumps(build_transaction(result.claim).to_dict(), indent=2))
    return 0


def main(argv=None) -> int:
    return asyncio.run(run(parse_args(argv)))


if __name__ == "__main__":
    sys.exit(main())
