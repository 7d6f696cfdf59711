"""YAML rendering for training-data documents.

Every string scalar is emitted through the ``yaml_str`` filter. A JSON string
literal is a valid YAML double-quoted scalar, so quotes, colons and newlines
in user text cannot break the document structure. Jinja's own ``tojson`` is
not used because it HTML-escapes ``'``, ``&``, ``<`` and ``>``.
"""

import json
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from synthdata.schemas.artifacts import TrainingDataDocument

TEMPLATE_DIR = Path(__file__).parent / "templates"


def yaml_str(value: str) -> str:
    """Quote a string as a YAML double-quoted scalar, keeping non-ASCII text readable."""
    return json.dumps(value, ensure_ascii=False)


class TrainingDataRenderer:
    """Render TrainingDataDocument models as YAML text."""

    TEMPLATE_NAME = "training_data.yaml.j2"

    def __init__(self):
        self.env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=False,  # YAML must NOT be HTML-escaped
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["yaml_str"] = yaml_str

    def render(self, document: TrainingDataDocument) -> str:
        """Render a document.

        Args:
            document: Validated training-data document

        Returns:
            YAML string without leading or trailing whitespace
        """
        template = self.env.get_template(self.TEMPLATE_NAME)
        return template.render(document=document).strip()
