"""Connect Four against an automated opponent (engine, session controller, Qt frontend)."""
