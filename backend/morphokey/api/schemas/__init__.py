from morphokey.api.schemas.v1 import (
    AnalyzeRequest,
    AnalyzeResponse,
    AnalyzeTokensRequest,
    CandidateRecord,
    SuggestRequest,
    SuggestResponse,
)

__all__ = [
    "AnalyzeRequest",
    "AnalyzeResponse",
    "AnalyzeTokensRequest",
    "CandidateRecord",
    "SuggestRequest",
    "SuggestResponse",
]
