"""
API v1 router aggregation.
"""
from fastapi import APIRouter
from sentencelab.api.v1.endpoints import (
    tags, vocabulary, templates, generation, generated_sentences, practice
)

api_router = APIRouter()

# Include all endpoint routers
# Note: Each router already defines its own prefix, so we don't add another one here
api_router.include_router(tags.router)
api_router.include_router(vocabulary.router)
api_router.include_router(templates.router)
api_router.include_router(generation.router)
api_router.include_router(generated_sentences.router)
api_router.include_router(practice.router)
