"""
Sentence generation endpoint.
"""
import random
from fastapi import APIRouter, Depends
from sqlmodel import Session
from sentencelab.core.database import get_session
from sentencelab.schemas.generation import GenerateSentenceRequest, GeneratedSentenceResult
from sentencelab.services.generation_service import generate_sentence
from sentencelab.api.v1.endpoints.utils import get_random

router = APIRouter(prefix="/generate", tags=["generation"])


@router.post("", response_model=GeneratedSentenceResult)
def generate(
    request: GenerateSentenceRequest,
    session: Session = Depends(get_session),
    rng: random.Random = Depends(get_random),
):
    """
    Generate one sentence for a tag and store it.

    This endpoint:
    1. Resolves a template (the given templateId, or a random active template of the tag)
    2. Fills every slot with a random word of the slot's part of speech that
       matches the constraints and the tag's vocabulary mappings
    3. Renders the sentence in displayField and aggregates politeness, JLPT level and difficulty
    4. Stores the sentence and its slot bindings in one transaction

    Errors:
        400 with {"error", "slot"} when a slot cannot be filled
        400 when the tag has no active template or the template has no slots
        404 when templateId or tagId does not exist
    """
    return generate_sentence(session, request, rng=rng)
