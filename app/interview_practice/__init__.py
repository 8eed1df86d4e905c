"""Interview practice core: prompts, parsing and session control."""
