from __future__ import annotations

from datetime import date

from ..domain import Difficulty, make_recipe


RECIPE = "implementing-series-for-nfts"

IMPLEMENTING_SERIES_FOR_NFTS = make_recipe(
    slug=RECIPE,
    title="Implementing Series for NFTs",
    created_at=date(2022, 10, 14),
    author="Flow Blockchain",
    playground_link=(
        "https://play.onflow.org/a7d190b6-e0f1-4acc-b34c-f37b39fbab33"
        "?type=tx&id=c252ea40-397c-43b0-acfb-c504a7268175&storage=none"
    ),
    excerpt=(
        "This cadence code will help you being to understand how to implement "
        "series and sets into your NFT project."
    ),
    filters={"difficulty": Difficulty.INTERMEDIATE},
)
