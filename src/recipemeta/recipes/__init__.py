from .implementing_series_for_nfts import IMPLEMENTING_SERIES_FOR_NFTS

__all__ = ["IMPLEMENTING_SERIES_FOR_NFTS"]
