"""User-facing front-ends for snippetsmith."""
