# ABOUTME: Vision package: client for the external image model that reads book photos.
# ABOUTME: Produces the ExtractedRecord that feeds the identification pipeline.

from shelfscan.vision.ollama import OllamaVisionClient, VisionError, parse_vision_response

__all__ = ["OllamaVisionClient", "VisionError", "parse_vision_response"]
