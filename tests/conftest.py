import re
from typing import Any, Callable, Dict

import pytest

from schema_ts import emit_document


def normalize(source: str) -> str:
    return re.sub(r"\s+", " ", source).strip()


@pytest.fixture()
def emit() -> Callable[..., str]:
    """Emit a document and return the whitespace-normalized models.ts."""

    def _emit(document: Dict[str, Any], **config: Any) -> str:
        config.setdefault("add_header_comment", False)
        files = emit_document(document, config)
        return normalize(files["models.ts"])

    return _emit


@pytest.fixture()
def person_document() -> Dict[str, Any]:
    return {
        "models": [
            {
                "name": "Person",
                "properties": {
                    "firstName": {"type": "string"},
                    "lastName": {"type": "string"},
                },
            }
        ]
    }
