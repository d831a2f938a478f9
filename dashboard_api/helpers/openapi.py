"""OpenAPI augmentation helpers.

Used by `dashboard_api.main` when serving the schema and by
`scripts/generate_openapi.py` when writing `docs/openapi.json`.
"""
from __future__ import annotations

from typing import Any, Dict

SEED_SUCCESS_EXAMPLE = {"message": "Database seeded successfully"}
SEED_FAILURE_EXAMPLE = {"error": "Failed to seed database"}


def _json_examples(operation: Dict[str, Any], status_code: str) -> Dict[str, Any]:
    response = operation.setdefault("responses", {}).setdefault(status_code, {})
    content = response.setdefault("content", {})
    app_json = content.setdefault("application/json", {})
    return app_json.setdefault("examples", {})


def augment_openapi(spec: Dict[str, Any]) -> Dict[str, Any]:
    """Return `spec` augmented with examples for key operations.

    Adds:
    - success and failure examples for GET /seed
    - a 429 response for GET /seed (rate limited)
    """
    s = spec

    # Ensure paths exist
    paths = s.setdefault("paths", {})

    get_seed = paths.get("/seed", {}).get("get")

    if get_seed is not None:
        _json_examples(get_seed, "200")["seeded"] = {
            "summary": "Schema ensured and placeholder data inserted",
            "value": SEED_SUCCESS_EXAMPLE,
        }
        _json_examples(get_seed, "500")["seed_failed"] = {
            "summary": "Any step failed; the transaction was rolled back",
            "value": SEED_FAILURE_EXAMPLE,
        }

        rate_limited = get_seed["responses"].setdefault("429", {"description": "Rate limit exceeded"})
        rate_limited.setdefault("content", {}).setdefault("application/json", {}).setdefault(
            "example", {"error": "Rate limit exceeded"}
        )

    return s


__all__ = ["augment_openapi", "SEED_SUCCESS_EXAMPLE", "SEED_FAILURE_EXAMPLE"]
