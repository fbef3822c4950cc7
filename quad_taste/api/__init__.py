"""HTTP API for the taste questionnaire and report."""
