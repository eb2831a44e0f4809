"""Business logic used by the handlers: prompt templates, dispatch and the Gemini client."""
