"""POST /api/recognize — stateless single-stroke recognition."""

from __future__ import annotations

from fastapi import APIRouter

from app.engine.recognizer import create_recognizer, describe
from app.engine.shapes import ShapeStyle
from app.models.requests import RecognizeRequest
from app.models.responses import RecognizeResponse, ShapeResponse

router = APIRouter()


@router.post("/recognize", response_model=RecognizeResponse)
async def recognize(req: RecognizeRequest) -> RecognizeResponse:
    recognizer = create_recognizer()
    shape = recognizer.classify(
        [(p.x, p.y) for p in req.points],
        ShapeStyle(**req.style.model_dump()),
    )
    return RecognizeResponse(shape=ShapeResponse.from_shape(shape), message=describe(shape))
