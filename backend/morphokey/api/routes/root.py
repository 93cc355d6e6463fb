from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/")
def api_root() -> dict[str, str]:
    return {"status": "ok", "message": "morphokey next-word backend"}


@router.get("/health")
def health(request: Request) -> dict[str, object]:
    tokenizer_ready = bool(getattr(request.app.state, "tokenizer_ready", False))
    payload: dict[str, object] = {
        "status": "ok" if tokenizer_ready else "degraded",
        "service": "backend",
        "components": {
            "tokenizer": "ok" if tokenizer_ready else "degraded",
        },
    }

    tokenizer_error = getattr(request.app.state, "tokenizer_error", None)
    if tokenizer_error:
        payload["tokenizer_error"] = str(tokenizer_error)

    return payload
