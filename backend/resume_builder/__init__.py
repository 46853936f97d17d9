"""AI résumé builder backend.

Editing sessions over a structured résumé, an HTML preview, and an
enhancement gateway that asks an OpenAI-compatible chat model to rewrite the
wording and validates the JSON it sends back.
"""
