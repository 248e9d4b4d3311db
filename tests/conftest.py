from __future__ import annotations

from datetime import date
from pathlib import Path
import sys
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture()
def temp_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture()
def recipe_kwargs() -> dict[str, Any]:
    return {
        "slug": "implementing-series-for-nfts",
        "title": "Implementing Series for NFTs",
        "created_at": date(2022, 10, 14),
        "author": "Flow Blockchain",
        "playground_link": (
            "https://play.onflow.org/a7d190b6-e0f1-4acc-b34c-f37b39fbab33"
            "?type=tx&id=c252ea40-397c-43b0-acfb-c504a7268175&storage=none"
        ),
        "excerpt": "This ... NFT project.",
        "filters": {"difficulty": "intermediate"},
    }
