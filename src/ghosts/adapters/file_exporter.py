"""Escritura de los documentos generados.

Por qué está en adapters:
- Escribir a disco es infraestructura; los renderers solo devuelven texto.
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def export_text(*, content: str, output_path: Path) -> Path:
    """Escribe `content` en UTF-8 tal cual (sin normalizar saltos de línea)."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    with output_path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    logger.info("Wrote %s (%d bytes)", output_path, len(content.encode("utf-8")))
    return output_path
