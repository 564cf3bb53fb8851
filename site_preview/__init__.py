"""AI website preview generator for local service businesses.

Package structure:
    site_preview/config.py       – paths, API keys, model settings, retry tuning
    site_preview/errors.py       – error kinds surfaced by the pipeline
    site_preview/slug.py         – business name -> URL-safe slug
    site_preview/loaders/        – content JSON and HTML template I/O
    site_preview/pipeline/       – system prompt, content providers, retry, orchestration
    site_preview/validation/     – structural checks and the content summary
    site_preview/render.py       – flattening and placeholder substitution
    site_preview/manifest.py     – append-only generation log
"""
