"""
ABI resource loading.

ABIs are opaque configuration: bundled JSON resources, files supplied by the
embedding application, raw JSON, or already-parsed lists.
"""

import json
import logging
from importlib.resources import files
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from multidex.exceptions import AbiLoadError

logger = logging.getLogger(__name__)

AbiSource = Union[str, bytes, Path, Sequence[Dict[str, Any]]]

ERC20_ABI_RESOURCE = "erc20.json"
UNISWAP_V2_ROUTER_ABI_RESOURCE = "uniswap_v2_router.json"


def _bundled(name: str):
    return files("multidex") / "resources" / name


def _read_source(source: Union[str, bytes, Path]) -> str:
    if isinstance(source, bytes):
        return source.decode("utf-8")
    if isinstance(source, Path):
        return source.read_text(encoding="utf-8")

    stripped = source.lstrip()
    if stripped.startswith("[") or stripped.startswith("{"):
        return source

    resource = _bundled(source)
    if resource.is_file():
        return resource.read_text(encoding="utf-8")
    return Path(source).read_text(encoding="utf-8")


def load_abi(source: AbiSource) -> List[Dict[str, Any]]:
    """
    Load an ABI from any supported source.

    Accepts a parsed list of entries, JSON text or bytes, a Path, a file path
    string, or the name of a bundled resource (e.g. "uniswap_v2_router.json").
    Compiled artifacts shaped like {"abi": [...]} are unwrapped.

    Raises:
        AbiLoadError: Resource missing, unreadable or not a list of entries
    """
    if isinstance(source, (list, tuple)):
        parsed: Any = list(source)
    else:
        try:
            parsed = json.loads(_read_source(source))
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
            raise AbiLoadError(f"Could not load ABI from {source!r:.80}: {e}") from e

    if isinstance(parsed, dict) and "abi" in parsed:
        parsed = parsed["abi"]

    if not isinstance(parsed, list) or not all(isinstance(entry, dict) for entry in parsed):
        raise AbiLoadError("ABI must be a JSON list of entries")

    logger.debug(f"Loaded ABI with {len(parsed)} entries")
    return parsed


def function_names(abi: Sequence[Dict[str, Any]]) -> List[str]:
    return [entry["name"] for entry in abi if entry.get("type") == "function" and "name" in entry]
