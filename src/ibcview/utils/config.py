# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Tsar Studio
# Part of IBCView - see LICENSE
# Refs: BIP173; CIP-19; CIP-5

'''
=============================================================================
 -------- DISPLAY-CRITICAL REMINDER - READ BEFORE EDITING --------
=============================================================================

Addresses shown by the explorer must be verifiable by third-party tools.
Changing any value below renders different (and wrong) addresses:

  1) CARDANO ADDRESS LAYOUT
   - CREDENTIAL_HASH_SIZE
   - HEADER_ENTERPRISE_KEY, HEADER_ENTERPRISE_SCRIPT
   - NETWORK_ID_MAINNET, NETWORK_ID_TESTNET
   - HRP_MAINNET, HRP_TESTNET

  2) BECH32
   - BECH32_MAX_LENGTH, BECH32_HRP_MAX_LENGTH

SAFE TO TUNE (presentation only):
   truncation lengths, placeholder, timezone, datetime formats,
   built-in chain table, logging.

The active network is NEVER chosen here. Callers pass a NetworkContext
into every address call.

=============================================================================
'''

import os
import appdirs


# =============================================================================
# 1. MODE & APPLICATION
# =============================================================================
# ---- RUNTIME PROFILE ----
MODE   = os.environ.get("IBCVIEW_MODE", "dev")  # runtime profile, "prod" for deployed explorers
IS_DEV = (MODE.lower() == "dev")  # cached boolean to simplify dev/prod toggles

# ---- APP METADATA ----
APP_NAME        = "IBCView"  # display name used for user data directories
APP_AUTHOR      = "TsarStudio"  # vendor string passed into platform dir helpers
USER_CONFIG_DIR = appdirs.user_config_dir(APP_NAME, APP_AUTHOR)  # OS-specific config folder resolved via appdirs
USER_LOG_DIR    = appdirs.user_log_dir(APP_NAME, APP_AUTHOR)  # OS-specific log folder resolved via appdirs


# =============================================================================
# 2. CARDANO NETWORKS
# =============================================================================
# ---- NETWORK MAGICS ----
MAGIC_MAINNET   = 764824073  # Cardano mainnet protocol magic
MAGIC_PREPROD   = 1  # pre-production testnet
MAGIC_PREVIEW   = 2  # preview testnet
MAGIC_SANCHONET = 4  # governance testnet
MAGIC_DEVNET    = 42  # local bridge devnet started by caribic

# ---- ADDRESS PREFIXES ----
HRP_MAINNET = "addr"  # bech32 prefix for mainnet payment addresses
HRP_TESTNET = "addr_test"  # bech32 prefix shared by every test network

# ---- HEADER BYTE ----
NETWORK_ID_MAINNET        = 0b0001  # low header nibble on mainnet
NETWORK_ID_TESTNET        = 0b0000  # low header nibble on every testnet
HEADER_ENTERPRISE_KEY     = 0b0110  # high nibble: enterprise address, key-hash payment part
HEADER_ENTERPRISE_SCRIPT  = 0b0111  # high nibble: enterprise address, script-hash payment part

# ---- CREDENTIALS ----
CREDENTIAL_HASH_SIZE   = 28  # blake2b-224 digest length of key and script hashes
CREDENTIAL_TAG_KEY     = 0x00  # in-band tag for key-hash credentials (29-byte form)
CREDENTIAL_TAG_SCRIPT  = 0x01  # in-band tag for script-hash credentials (29-byte form)


# =============================================================================
# 3. BECH32
# =============================================================================
BECH32_MAX_LENGTH     = 1023  # Cardano lifts BIP-173's 90 char limit
BECH32_HRP_MAX_LENGTH = 83  # BIP-173 prefix limit
BECH32_CHECKSUM_LEN   = 6  # checksum characters appended after the data part


# =============================================================================
# 4. DISPLAY DEFAULTS
# =============================================================================
# ---- TRUNCATION ----
ELLIPSIS          = "…"  # single-character ellipsis between head and tail
EMPTY_PLACEHOLDER = "--"  # shown when an optional hash is missing
HASH_HEAD         = 4  # characters kept at the start of a tx hash
HASH_TAIL         = 4  # characters kept at the end of a tx hash
ADDRESS_HEAD      = 6  # characters kept at the start of an address
ADDRESS_TAIL      = 6  # characters kept at the end of an address

# ---- TIME ----
DISPLAY_TIMEZONE = "UTC"  # fixed default zone; never the host's local zone
DATETIME_FORMAT  = "%Y-%m-%d %H:%M:%S"  # combined date and time
TIME_FORMAT      = "%H:%M:%S"  # time of day only
ROW_TIME_ONLY    = True  # the transfer table shows time of day only


# =============================================================================
# 5. CHAIN REGISTRY
# =============================================================================
# ---- OVERRIDE FILE ----
CHAIN_REGISTRY_PATH = os.environ.get(
    "IBCVIEW_CHAIN_REGISTRY",
    os.path.join(USER_CONFIG_DIR, "chains.json"),
)  # optional JSON overlay in cosmos chain-registry shape

# ---- BUILT-IN CHAINS ----
_LOGO_BASE = "https://raw.githubusercontent.com/cosmos/chain-registry/master"
DEFAULT_CHAINS = {
    "cardano": {
        "chain_name": "cardano",
        "pretty_name": "Cardano",
        "logo_URIs": {"svg": f"{_LOGO_BASE}/cardano/images/ada.svg"},
    },
    "42": {
        "chain_name": "cardano-devnet",
        "pretty_name": "Cardano Devnet",
        "logo_URIs": {"svg": f"{_LOGO_BASE}/cardano/images/ada.svg"},
    },
    "sidechain": {
        "chain_name": "sidechain",
        "pretty_name": "Cosmos Sidechain",
        "logo_URIs": {"png": f"{_LOGO_BASE}/cosmoshub/images/atom.png"},
    },
    "localosmosis": {
        "chain_name": "localosmosis",
        "pretty_name": "Local Osmosis",
        "logo_URIs": {"svg": f"{_LOGO_BASE}/osmosis/images/osmo.svg"},
    },
    "osmosis-1": {
        "chain_name": "osmosis",
        "pretty_name": "Osmosis",
        "logo_URIs": {
            "png": f"{_LOGO_BASE}/osmosis/images/osmo.png",
            "svg": f"{_LOGO_BASE}/osmosis/images/osmo.svg",
        },
    },
    "cosmoshub-4": {
        "chain_name": "cosmoshub",
        "pretty_name": "Cosmos Hub",
        "logo_URIs": {
            "png": f"{_LOGO_BASE}/cosmoshub/images/atom.png",
            "svg": f"{_LOGO_BASE}/cosmoshub/images/atom.svg",
        },
    },
}  # chain id -> registry entry, read once at startup


# =============================================================================
# 6. LOGGING
# =============================================================================
# ---- BASE OUTPUT ----
LOG_PATH             = os.path.join(USER_LOG_DIR, "ibcview.log")  # canonical log file path before format-specific override
LOG_SHOW_PROCESS     = False  # include process metadata in log context when True
LOG_PROC_PLACEHOLDER = "-"  # value used when process info is hidden

# ---- MODE PROFILES ----
if IS_DEV:
    # ---- DEV PROFILE ----
    LOG_LEVEL                   = "TRACE"  # very verbose logging for development
    LOG_FORMAT                  = "plain"  # plain text logs ease local debugging
    LOG_TO_CONSOLE              = True  # mirror logs to stdout for dev loops
    LOG_RATE_LIMIT_SECONDS      = 0.0  # disable console throttling in dev
    LOG_FILE_RATE_LIMIT_SECONDS = 0.0  # disable file throttling in dev
    LOG_ROTATE_MAX_BYTES        = 5_000_000  # rollover log files after ~5MB in dev
    LOG_BACKUP_COUNT            = 3  # retain a few rotated dev log files
else:
    # ---- PROD PROFILE ----
    LOG_LEVEL                   = "INFO"  # balanced verbosity for production
    LOG_FORMAT                  = "json"  # JSON logs simplify ingestion in prod
    LOG_TO_CONSOLE              = False  # quiet when embedded in a server
    LOG_RATE_LIMIT_SECONDS      = 2.0  # throttle console spam in prod
    LOG_FILE_RATE_LIMIT_SECONDS = 1.0  # throttle file spam in prod
    LOG_ROTATE_MAX_BYTES        = 10_000_000  # rollover log files after ~10MB in prod
    LOG_BACKUP_COUNT            = 7  # keep more history on production hosts

# ---- LOG PATH NORMALIZATION ----
if str(LOG_FORMAT).lower().strip() == "json":
    LOG_PATH = os.path.join(USER_LOG_DIR, "ibcview.jsonl")  # JSON lines extension to aid parsing
