"""
FastAPI backend server for the FAQ chatbot.

Exposes the chatbot over HTTP: a question comes in as a query parameter and the
answer is returned together with the conversation completion flag.
"""

import sys
import logging
import threading
from pathlib import Path
from datetime import datetime
from typing import Optional

# Import configuration
from config import config

# Configure logging for the backend
logging.basicConfig(
    level=getattr(logging, config.logging.level, logging.INFO),
    format=config.logging.format,
    handlers=[
        logging.StreamHandler(sys.stdout)
    ]
)

# Set specific loggers to appropriate levels
logging.getLogger("faq_chatbot").setLevel(getattr(logging, config.logging.level, logging.INFO))
logging.getLogger("urllib3").setLevel(logging.WARNING)  # Reduce HTTP noise

logger = logging.getLogger(__name__)

from fastapi import Depends, FastAPI, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

# Add the root directory to Python path to import the chatbot library
root_dir = Path(__file__).parent.parent.parent
sys.path.insert(0, str(root_dir))

from faq_chatbot import (
    FaqChatbot,
    ChatbotError,
    ResourceLoadError,
    TrainingError,
    PreprocessingError,
    ClassificationError
)


# Initialize FastAPI app
app = FastAPI(
    title="FAQ Chatbot API",
    description="Answers FAQ-style questions with canned answers per detected category",
    version="1.0.0"
)

# Echo the requesting origin back, as browsers require with credentials.
# CORS headers are only added to requests carrying an Origin header.
app.add_middleware(
    CORSMiddleware,
    allow_origin_regex=config.api.cors_origin_regex,
    allow_credentials=config.api.cors_allow_credentials,
    allow_methods=config.api.cors_methods,
    allow_headers=config.api.cors_headers,
    max_age=config.api.cors_max_age,
)

# Global chatbot instance, built on first use
_chatbot: Optional[FaqChatbot] = None
_chatbot_lock = threading.Lock()


def get_chatbot() -> FaqChatbot:
    """Get the shared chatbot, loading resources and training the model once."""
    global _chatbot
    with _chatbot_lock:
        if _chatbot is None:
            logger.info("Initializing FAQ chatbot")
            _chatbot = FaqChatbot.from_config()
            logger.info(f"FAQ chatbot ready with categories: {_chatbot.get_categories()}")
    return _chatbot


# Pydantic models for API responses
class AnswerModel(BaseModel):
    """API model for a chatbot answer."""
    answer: str = Field(..., description="Canned answers joined in sentence order")
    conversationComplete: bool = Field(..., description="Whether the conversation should end")


class ErrorResponse(BaseModel):
    """API model for error responses."""
    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(default=None, description="Error details")
    type: str = Field(default="error", description="Error type")


def handle_api_error(e: Exception) -> JSONResponse:
    """Handle API errors and return appropriate JSON response."""
    if isinstance(e, PreprocessingError):
        status_code, error_type = 422, "preprocessing_error"
        details = f"stage: {e.stage}"
    elif isinstance(e, ClassificationError):
        status_code, error_type = 500, "classification_error"
        details = None
    elif isinstance(e, (ResourceLoadError, TrainingError)):
        status_code, error_type = 503, "configuration_error"
        details = type(e).__name__
    else:
        status_code, error_type = 500, "internal_error"
        details = None

    logger.error(f"Request failed with {type(e).__name__}: {e}")
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(
            error=str(e),
            details=details,
            type=error_type
        ).model_dump()
    )


@app.exception_handler(ChatbotError)
async def chatbot_error_handler(request: Request, exc: ChatbotError) -> JSONResponse:
    return handle_api_error(exc)


# API Endpoints

@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "message": "FAQ Chatbot API",
        "version": "1.0.0",
        "endpoints": {
            "answer": f"{config.api.prefix}/getAnswer",
            "health": "/health",
            "docs": "/docs"
        }
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "chatbot_initialized": _chatbot is not None
    }


@app.get(f"{config.api.prefix}/getAnswer", response_model=AnswerModel)
def get_answer(
    question: str = Query(..., description="User question"),
    chatbot: FaqChatbot = Depends(get_chatbot)
):
    """Answer a question."""
    response = chatbot.answer(question)
    return AnswerModel(**response.to_dict())


if __name__ == "__main__":
    import uvicorn

    print("Starting FAQ Chatbot API server...")

    uvicorn.run(
        "backend_api:app",
        host=config.api.host,
        port=config.api.port,
        reload=False,
        log_level=config.logging.level.lower()
    )
