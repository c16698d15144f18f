# Web API: FastAPI app exposing POST /api/generate (streamed plain text)
"""
HTTP layer for the blog writer.

Run with:
    uvicorn blog_writer.web.main:app --reload
"""
