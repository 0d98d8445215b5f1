import os
import sys

from dotenv import load_dotenv

from enums.currency import Currency

# Load .env but don't override existing environment variables
# This allows test scripts to set variables before import
load_dotenv(".env", override=False)

# Parse CURRENCY with clear error message on misconfiguration
try:
    CURRENCY = Currency(os.environ.get("CURRENCY", "BRL"))
except ValueError as e:
    valid_currencies = [c.value for c in Currency]
    print(f"\n ERROR: Invalid CURRENCY configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Valid values: {', '.join(valid_currencies)}", file=sys.stderr)
    print(f"Current value: {os.environ.get('CURRENCY', '(not set)')}", file=sys.stderr)
    print(f"\nAdd to .env: CURRENCY={valid_currencies[0]}\n", file=sys.stderr)
    sys.exit(1)

# Parse PRICE_DECIMALS with error handling
try:
    PRICE_DECIMALS = int(os.environ.get("PRICE_DECIMALS", "2"))
    if PRICE_DECIMALS < 0:
        raise ValueError(f"PRICE_DECIMALS must not be negative (got: {PRICE_DECIMALS})")
except ValueError as e:
    print(f"\n ERROR: Invalid PRICE_DECIMALS configuration\n", file=sys.stderr)
    print(f"Reason: {e}", file=sys.stderr)
    print(f"Expected: Non-negative integer (e.g., 0, 2)", file=sys.stderr)
    print(f"Current value: {os.environ.get('PRICE_DECIMALS', '(not set)')}\n", file=sys.stderr)
    sys.exit(1)

# Logging Configuration
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")  # DEBUG, INFO, WARNING, ERROR, CRITICAL
LOG_MASK_SECRETS = os.environ.get("LOG_MASK_SECRETS", "true") == "true"  # Mask customer data in logs
LOG_RETENTION_DAYS = int(os.environ.get("LOG_RETENTION_DAYS", "5"))
LOG_DIR = os.environ.get("LOG_DIR", "logs")
