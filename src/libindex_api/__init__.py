"""libindex: GitHub-backed catalog of published Maven libraries."""
