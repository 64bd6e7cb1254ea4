from .fetcher import PageFetcherPort
from .page import PageDocument
from .sink import ResultSinkPort

__all__ = [
    "PageFetcherPort",
    "PageDocument",
    "ResultSinkPort",
]
